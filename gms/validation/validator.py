"""
Organization registration validator.

validate() is a pure function of its input: every rule in the table runs on
every call and all failing fields are reported together. Invalid input is
returned as a field-error map, never raised.
"""
from dataclasses import dataclass, field as dc_field
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from email_validator import validate_email, EmailNotValidError

from gms.core.reference_data import ReferenceData, ReferenceDataError, get_reference_data
from gms.schemas.organization import OrganizationRegistration
from gms.validation.errors import ErrorCode, FieldError, format_errors
from gms.validation.rules import FieldKind, FieldRule, ORGANIZATION_RULES

_ABSENT = object()


@dataclass(frozen=True)
class ValidationResult:
    """Either a normalized record or a non-empty field-error map"""
    record: Optional[OrganizationRegistration] = None
    errors: Dict[str, FieldError] = dc_field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages(self) -> Dict[str, str]:
        return format_errors(self.errors)


class OrganizationRegistrationValidator:
    """Evaluates the registration rule table against raw input"""

    def __init__(
        self,
        reference_data: ReferenceData,
        rules: Iterable[FieldRule] = ORGANIZATION_RULES,
        today: Callable[[], date] = date.today,
    ):
        if not isinstance(reference_data, ReferenceData):
            raise ReferenceDataError("Validator requires loaded reference data")
        self.reference_data = reference_data
        self.rules: Tuple[FieldRule, ...] = tuple(rules)
        self._rules_by_field = {rule.field: rule for rule in self.rules}
        self._today = today

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        if not isinstance(payload, Mapping):
            raise TypeError(f"Registration payload must be a mapping, got {type(payload).__name__}")

        values: Dict[str, Any] = {}
        errors: Dict[str, FieldError] = {}

        for rule in self.rules:
            value, error = self._check_field(rule, payload.get(rule.field, _ABSENT))
            if error is not None:
                errors[rule.field] = error
            elif value is not None:
                values[rule.field] = value

        for rule in self.rules:
            if rule.field in errors or rule.field not in values:
                continue
            error = self._check_cross_field(rule, values, errors)
            if error is not None:
                errors[rule.field] = error

        if errors:
            return ValidationResult(errors=errors)

        record = OrganizationRegistration(
            **{self._rules_by_field[name].attribute: value for name, value in values.items()}
        )
        return ValidationResult(record=record)

    def _check_field(self, rule: FieldRule, raw: Any) -> Tuple[Any, Optional[FieldError]]:
        if rule.kind == FieldKind.DATE:
            return self._check_date(rule, raw)

        if raw is _ABSENT or raw is None:
            value = ""
        elif isinstance(raw, str):
            value = raw if rule.kind == FieldKind.PASSWORD else raw.strip()
        else:
            return None, FieldError(ErrorCode.INVALID_FORMAT, f"{rule.label} must be text")

        if not value.strip():
            if rule.default is not None:
                return rule.default, None
            if rule.required:
                return None, FieldError(ErrorCode.MISSING, f"{rule.label} is required")
            return None, None

        if rule.max_length and len(value) > rule.max_length:
            return None, FieldError(
                ErrorCode.INVALID_FORMAT, f"{rule.label} must be at most {rule.max_length} characters"
            )

        if rule.kind == FieldKind.EMAIL:
            try:
                value = validate_email(value, check_deliverability=False).normalized
            except EmailNotValidError:
                return None, FieldError(ErrorCode.INVALID_FORMAT, f"{rule.label} must be a valid email address")

        elif rule.kind == FieldKind.PASSWORD:
            if rule.min_length and len(value) < rule.min_length:
                return None, FieldError(
                    ErrorCode.TOO_SHORT, f"{rule.label} must be at least {rule.min_length} characters"
                )

        elif rule.kind == FieldKind.PATTERN:
            if not rule.pattern.fullmatch(value):
                return None, FieldError(
                    ErrorCode.INVALID_FORMAT, f"{rule.label} must match the format {rule.format_hint}"
                )

        elif rule.kind == FieldKind.PROVINCE:
            if not self.reference_data.is_province(value):
                return None, FieldError(ErrorCode.UNKNOWN_VALUE, f"'{value}' is not a recognised {rule.label.lower()}")

        return value, None

    def _check_date(self, rule: FieldRule, raw: Any) -> Tuple[Optional[date], Optional[FieldError]]:
        if raw is _ABSENT or raw is None or (isinstance(raw, str) and not raw.strip()):
            if rule.required:
                return None, FieldError(ErrorCode.MISSING, f"{rule.label} is required")
            return None, None

        value = parse_date(raw)
        if value is None:
            return None, FieldError(ErrorCode.INVALID_FORMAT, f"{rule.label} must be a date (YYYY-MM-DD)")

        if rule.not_future and value > self._today():
            return None, FieldError(ErrorCode.FUTURE_DATE, f"{rule.label} cannot be in the future")
        return value, None

    def _check_cross_field(
        self, rule: FieldRule, values: Mapping[str, Any], errors: Mapping[str, FieldError]
    ) -> Optional[FieldError]:
        if rule.kind == FieldKind.CITY and rule.depends_on:
            # only judged against a province that itself passed
            province = values.get(rule.depends_on)
            if province is None or rule.depends_on in errors:
                return None
            city = values[rule.field]
            if not self.reference_data.is_city_of(province, city):
                return FieldError(ErrorCode.UNKNOWN_VALUE, f"'{city}' is not a city in {province}")

        if rule.kind == FieldKind.DATE and rule.not_before:
            start = values.get(rule.not_before)
            if start is None:
                return None
            if values[rule.field] < start:
                start_label = self._rules_by_field[rule.not_before].label.lower()
                return FieldError(ErrorCode.BEFORE_START, f"{rule.label} cannot be before the {start_label}")

        return None


def parse_date(raw: Any) -> Optional[date]:
    """ISO date or datetime (string or object) -> date; None when unparseable"""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def get_validator() -> OrganizationRegistrationValidator:
    """Validator bound to the process-wide reference data"""
    return OrganizationRegistrationValidator(get_reference_data())


def validate_organization(payload: Mapping[str, Any]) -> ValidationResult:
    return get_validator().validate(payload)
