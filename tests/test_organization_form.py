"""
Add-organization form view-model tests
"""
import httpx
import pytest
from datetime import date

from gms.client import ApiError, OrganizationsClient
from gms.validation import ErrorCode, FieldError, OrganizationRegistrationValidator
from gms.viewmodels.organization_form import (
    FieldChanged,
    FormReset,
    OrganizationFormState,
    city_options,
    submit_form,
    update,
)


class FakeClient:
    def __init__(self, error=None):
        self.error = error
        self.submitted = []

    def create_organization(self, record):
        self.submitted.append(record)
        if self.error:
            raise self.error
        return {"id": 1, "name": record.name}


@pytest.fixture
def validator(reference_data):
    return OrganizationRegistrationValidator(reference_data, today=lambda: date(2025, 6, 1))


def filled(payload):
    state = OrganizationFormState()
    for field, value in payload.items():
        state = update(state, FieldChanged(field, value))
    return state


@pytest.mark.unit
def test_changing_province_resets_city(valid_payload):
    state = filled(valid_payload)
    assert state.values["city"] == "Lahore"

    state = update(state, FieldChanged("province", "Sindh"))

    assert state.values["province"] == "Sindh"
    assert state.values["city"] == ""


@pytest.mark.unit
def test_same_province_keeps_city(valid_payload):
    state = update(filled(valid_payload), FieldChanged("province", "Punjab"))
    assert state.values["city"] == "Lahore"


@pytest.mark.unit
def test_editing_a_field_clears_its_error():
    state = OrganizationFormState(errors={"name": FieldError(ErrorCode.MISSING, "Organization name is required")})
    state = update(state, FieldChanged("name", "Acme"))
    assert "name" not in state.errors


@pytest.mark.unit
def test_invalid_form_makes_no_network_call(validator, valid_payload):
    client = FakeClient()
    state = filled({**valid_payload, "email": "bad", "password": "short"})

    state = submit_form(state, validator, client)

    assert client.submitted == []
    assert set(state.errors) == {"email", "password"}
    assert state.errors["password"].code == ErrorCode.TOO_SHORT
    assert not state.is_submitting


@pytest.mark.unit
def test_valid_form_submits_once_and_resets(validator, valid_payload):
    client = FakeClient()

    state = submit_form(filled(valid_payload), validator, client)

    assert len(client.submitted) == 1
    assert client.submitted[0].role_name == "ORGANIZATION_ADMIN"
    assert state.created == {"id": 1, "name": "Acme"}
    assert state.message == "Organization created successfully"
    assert state.values == {}


@pytest.mark.unit
def test_server_rejection_is_surfaced(validator, valid_payload):
    error = ApiError(
        "Organization registration is invalid",
        status_code=400,
        field_errors={"email": FieldError(ErrorCode.INVALID_FORMAT, "Email must be a valid email address")},
    )
    client = FakeClient(error=error)

    state = submit_form(filled(valid_payload), validator, client)

    assert state.errors["email"].code == ErrorCode.INVALID_FORMAT
    assert state.message == "Organization registration is invalid"
    assert state.values["name"] == "Acme"
    assert not state.is_submitting


@pytest.mark.unit
def test_network_failure_is_surfaced(validator, valid_payload):
    client = FakeClient(error=ApiError("Could not reach the server: timeout"))

    state = submit_form(filled(valid_payload), validator, client)

    assert state.message == "Could not reach the server: timeout"
    assert state.errors == {}
    assert len(client.submitted) == 1


@pytest.mark.unit
@pytest.mark.parametrize("response", [httpx.Response(201), httpx.Response(201, text="created")])
def test_unreadable_success_response_is_surfaced(validator, valid_payload, response):
    http = httpx.Client(base_url="http://gms.test/api/v1", transport=httpx.MockTransport(lambda request: response))

    state = submit_form(filled(valid_payload), validator, OrganizationsClient(http_client=http))

    assert state.message == "Invalid response from server"
    assert state.created is None
    assert state.values["name"] == "Acme"
    assert not state.is_submitting


@pytest.mark.unit
def test_submit_ignored_while_in_flight(validator, valid_payload):
    client = FakeClient()
    state = filled(valid_payload).model_copy(update={"is_submitting": True})

    assert submit_form(state, validator, client) is state
    assert client.submitted == []


@pytest.mark.unit
def test_state_is_serializable(valid_payload):
    state = update(filled(valid_payload), FieldChanged("email", ""))
    state = state.model_copy(update={"errors": {"email": FieldError(ErrorCode.MISSING, "Email is required")}})

    dumped = state.model_dump(mode="json")

    assert dumped["values"]["name"] == "Acme"
    assert dumped["errors"]["email"] == {"code": "MISSING", "message": "Email is required"}


@pytest.mark.unit
def test_city_options_follow_province(reference_data, valid_payload):
    state = filled(valid_payload)
    assert "Lahore" in city_options(state, reference_data)
    assert city_options(OrganizationFormState(), reference_data) == []


@pytest.mark.unit
def test_reset_and_unknown_action(valid_payload):
    assert update(filled(valid_payload), FormReset()) == OrganizationFormState()
    with pytest.raises(TypeError):
        update(OrganizationFormState(), object())
