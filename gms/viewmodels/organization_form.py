"""
Add-organization form view-model.

The whole form lives in one serializable OrganizationFormState and changes only
through update(state, action). submit_form() runs the shared registration rules
before any network call, so the form shows exactly the errors the API would.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from gms.client.organizations import ApiError, OrganizationsClient
from gms.core.reference_data import ReferenceData
from gms.validation.errors import FieldError
from gms.validation.validator import OrganizationRegistrationValidator


class OrganizationFormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: Dict[str, str] = {}
    errors: Dict[str, FieldError] = {}
    is_submitting: bool = False
    message: Optional[str] = None
    created: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class FieldChanged:
    field: str
    value: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    organization: Dict[str, Any]


@dataclass(frozen=True)
class SubmitFailed:
    errors: Dict[str, FieldError] = field(default_factory=dict)
    message: Optional[str] = None


@dataclass(frozen=True)
class FormReset:
    pass


def update(state: OrganizationFormState, action) -> OrganizationFormState:
    if isinstance(action, FieldChanged):
        values = dict(state.values)
        errors = dict(state.errors)
        if action.field == "province" and values.get("province", "") != action.value:
            # a city chosen for the previous province is no longer valid
            values["city"] = ""
            errors.pop("city", None)
        values[action.field] = action.value
        errors.pop(action.field, None)
        return state.model_copy(update={"values": values, "errors": errors})

    if isinstance(action, SubmitStarted):
        return state.model_copy(update={"is_submitting": True, "message": None, "created": None})

    if isinstance(action, SubmitSucceeded):
        return OrganizationFormState(message="Organization created successfully", created=action.organization)

    if isinstance(action, SubmitFailed):
        return state.model_copy(update={
            "is_submitting": False,
            "errors": dict(action.errors),
            "message": action.message,
        })

    if isinstance(action, FormReset):
        return OrganizationFormState()

    raise TypeError(f"Unknown form action: {action!r}")


def submit_form(
    state: OrganizationFormState,
    validator: OrganizationRegistrationValidator,
    client: OrganizationsClient,
) -> OrganizationFormState:
    """Validate locally, then POST once; every failure ends up in the returned state"""
    if state.is_submitting:
        return state

    result = validator.validate(state.values)
    if not result.ok:
        return update(state, SubmitFailed(errors=result.errors, message="Please correct the highlighted fields"))

    state = update(state, SubmitStarted())
    try:
        organization = client.create_organization(result.record)
    except ApiError as e:
        return update(state, SubmitFailed(errors=e.field_errors, message=e.message))

    return update(state, SubmitSucceeded(organization=organization))


def city_options(state: OrganizationFormState, reference_data: ReferenceData) -> List[str]:
    """Cities selectable for the currently chosen province"""
    return list(reference_data.cities_for(state.values.get("province", "")))
