"""
Field-level validation error taxonomy
"""
import enum
from dataclasses import dataclass
from typing import Dict, Mapping


class ErrorCode(str, enum.Enum):
    """Client-input error kinds; none of them is a system fault"""
    MISSING = "MISSING"
    INVALID_FORMAT = "INVALID_FORMAT"
    TOO_SHORT = "TOO_SHORT"
    UNKNOWN_VALUE = "UNKNOWN_VALUE"
    FUTURE_DATE = "FUTURE_DATE"
    BEFORE_START = "BEFORE_START"


@dataclass(frozen=True)
class FieldError:
    code: ErrorCode
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"code": self.code.value, "message": self.message}


def format_errors(errors: Mapping[str, FieldError]) -> Dict[str, str]:
    """Field -> human-readable message, sorted by field name"""
    return {field: errors[field].message for field in sorted(errors)}


def serialize_errors(errors: Mapping[str, FieldError]) -> Dict[str, Dict[str, str]]:
    """Field -> {code, message}, the shape used in API payloads"""
    return {field: errors[field].as_dict() for field in sorted(errors)}


def deserialize_errors(payload: Mapping[str, Mapping[str, str]]) -> Dict[str, FieldError]:
    """Inverse of serialize_errors; unknown codes fall back to INVALID_FORMAT"""
    result = {}
    for field, item in payload.items():
        if not isinstance(item, Mapping):
            result[field] = FieldError(code=ErrorCode.INVALID_FORMAT, message=str(item))
            continue
        try:
            code = ErrorCode(item.get("code"))
        except ValueError:
            code = ErrorCode.INVALID_FORMAT
        result[field] = FieldError(code=code, message=str(item.get("message") or ""))
    return result
