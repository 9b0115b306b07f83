# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service outcomes — a value, or an error kind the HTTP layer maps to a status."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    UNRECOGNISED_FIELD = "unrecognised_field"
    INVALID = "invalid"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class Result:
    value: Any = None
    kind: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result":
        return cls(kind=kind, message=message)
