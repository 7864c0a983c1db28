import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api.routes import auth, bookings, pricing, misc
from .db.session import SessionLocal, init_db
from .config import get_settings
from .services.admin import ensure_admin_exists


logging.basicConfig(level=get_settings().log_level)

app = FastAPI(title="MDDroner Booking API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(bookings.router, prefix="/api/v1")
app.include_router(pricing.router, prefix="/api/v1")
app.include_router(misc.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event() -> None:
    init_db()
    settings = get_settings()
    with SessionLocal() as session:
        ensure_admin_exists(session, settings.default_admin_login, settings.default_admin_password)
