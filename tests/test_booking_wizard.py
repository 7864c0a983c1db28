import pytest

from mddroner.client.booking_wizard import BookingDraft, BookingWizard, WizardError, WizardStep


class RecordingSubmitter:
    def __init__(self, error: Exception | None = None) -> None:
        self.payloads: list[dict] = []
        self.error = error

    async def __call__(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return {"success": True}


def fill_wizard(wizard: BookingWizard) -> None:
    wizard.select_locations("coastal", "classic")
    wizard.advance()
    wizard.update_contact(
        name="李明",
        phone="+852 9876 5432",
        car_model="Porsche 911 Carrera",
        booking_date="2025-02-15",
    )
    wizard.advance()
    wizard.set_add_ons(
        multiple_vehicles=True,
        extra_vehicle_count=1,
        video_upgrade=True,
        video_location_count=2,
    )
    wizard.advance()


def test_cannot_leave_first_step_without_location():
    wizard = BookingWizard(RecordingSubmitter())

    assert not wizard.can_advance()
    with pytest.raises(WizardError):
        wizard.advance()
    assert wizard.step == WizardStep.locations


def test_contact_step_requires_all_fields():
    wizard = BookingWizard(RecordingSubmitter())
    wizard.select_locations("industrial")
    wizard.advance()
    wizard.update_contact(name="王芳", phone="+852 9876 5432", car_model="   ")

    with pytest.raises(WizardError) as exc_info:
        wizard.advance()

    assert "car_model" in str(exc_info.value)
    assert "booking_date" in str(exc_info.value)
    assert wizard.step == WizardStep.contact


def test_edits_produce_new_drafts():
    wizard = BookingWizard(RecordingSubmitter())
    before = wizard.draft

    after = wizard.select_locations("classic")

    assert before == BookingDraft()
    assert after is not before
    assert after.locations == ("classic",)


def test_route_label_joins_names_in_catalogue_order():
    wizard = BookingWizard(RecordingSubmitter())
    wizard.select_locations("coastal", "classic", "coastal")

    assert wizard.draft.route_label == "經典山道、海岸秘境"


def test_toggle_location():
    wizard = BookingWizard(RecordingSubmitter())
    wizard.toggle_location("classic")
    wizard.toggle_location("industrial")
    wizard.toggle_location("classic")

    assert wizard.draft.locations == ("industrial",)


def test_single_location_variant():
    wizard = BookingWizard(RecordingSubmitter(), multi_location=False)

    with pytest.raises(WizardError):
        wizard.select_locations("classic", "coastal")
    wizard.toggle_location("classic")
    wizard.toggle_location("coastal")

    assert wizard.draft.locations == ("coastal",)


def test_unknown_location_and_field_are_rejected():
    wizard = BookingWizard(RecordingSubmitter())

    with pytest.raises(WizardError):
        wizard.select_locations("moon")
    with pytest.raises(WizardError):
        wizard.update_contact(email="someone@example.com")


def test_back_keeps_data():
    wizard = BookingWizard(RecordingSubmitter())
    fill_wizard(wizard)
    draft = wizard.draft

    assert wizard.back() == WizardStep.add_ons
    assert wizard.draft == draft
    assert wizard.advance() == WizardStep.review


def test_review_estimate():
    wizard = BookingWizard(RecordingSubmitter())
    fill_wizard(wizard)

    assert wizard.draft.estimate() == 2800 + 800 + 1000


@pytest.mark.asyncio()
async def test_submit_only_from_review():
    submitter = RecordingSubmitter()
    wizard = BookingWizard(submitter)
    wizard.select_locations("classic")

    with pytest.raises(WizardError):
        await wizard.submit()
    assert submitter.payloads == []


@pytest.mark.asyncio()
async def test_successful_submit_resets():
    submitter = RecordingSubmitter()
    wizard = BookingWizard(submitter)
    fill_wizard(wizard)

    result = await wizard.submit()

    assert result == {"success": True}
    assert submitter.payloads == [
        {
            "route": "經典山道、海岸秘境",
            "name": "李明",
            "phone": "+852 9876 5432",
            "carModel": "Porsche 911 Carrera",
            "carPlate": None,
            "bookingDate": "2025-02-15",
            "specialRequests": None,
            "multipleVehicles": True,
            "videoUpgrade": True,
        }
    ]
    assert wizard.step == WizardStep.locations
    assert wizard.draft == BookingDraft()


@pytest.mark.asyncio()
async def test_failed_submit_keeps_review_state():
    submitter = RecordingSubmitter(error=RuntimeError("network down"))
    wizard = BookingWizard(submitter)
    fill_wizard(wizard)
    draft = wizard.draft

    with pytest.raises(RuntimeError):
        await wizard.submit()

    assert wizard.step == WizardStep.review
    assert wizard.draft == draft

    submitter.error = None
    await wizard.submit()
    assert len(submitter.payloads) == 2
    assert wizard.step == WizardStep.locations
