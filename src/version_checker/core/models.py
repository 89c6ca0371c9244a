from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

# Failure reported when the application's own metadata cannot be read
VERSION_ERROR = "VERSION_ERROR"
VERSION_ERROR_MESSAGE = "Could not get app version"


class Operation(str, Enum):
    """Operations understood by the version query service."""

    GET_PLATFORM_VERSION = "getPlatformVersion"
    GET_APP_VERSION = "getAppVersion"

    @classmethod
    def from_method(cls, method: str) -> Optional["Operation"]:
        """Return the operation for a method name, or None if unknown."""
        try:
            return cls(method)
        except ValueError:
            return None


@dataclass(frozen=True)
class MethodCall:
    """A single request naming the operation to run.

    The method name is kept verbatim; unknown names are answered with
    an ``Unsupported`` response rather than rejected here.
    """

    method: str

    @property
    def operation(self) -> Optional[Operation]:
        return Operation.from_method(self.method)


def build_number_to_text(value: Any) -> str:
    """Render a build identifier as exact decimal text.

    Integers of any width are formatted with ``str`` so large codes such as
    2147483648 survive without truncation or exponent notation. Strings are
    returned unchanged.

    Raises:
        TypeError: If the value is neither an integer nor a string.
    """
    # bool is an int subclass but never a meaningful build number
    if isinstance(value, bool):
        raise TypeError("Build number must be an integer or string, got bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Build number must be an integer or string, got {type(value).__name__}")


@dataclass(frozen=True)
class VersionInfo:
    """Application version metadata.

    Attributes:
        version: Human-readable application version (e.g. "1.2.3").
        build_number: Build identifier, always as text.
    """

    version: str
    build_number: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "build_number", build_number_to_text(self.build_number))

    def to_dict(self) -> Dict[str, str]:
        return {"version": self.version, "buildNumber": self.build_number}


@dataclass(frozen=True)
class Success:
    """Successful outcome carrying a platform string or a VersionInfo."""

    value: Union[str, VersionInfo]

    def to_dict(self) -> Dict[str, Any]:
        result = self.value.to_dict() if isinstance(self.value, VersionInfo) else self.value
        return {"status": "success", "result": result}


@dataclass(frozen=True)
class Failure:
    """A coded failure for an operation that exists but could not complete."""

    code: str
    message: str
    details: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": "error",
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


@dataclass(frozen=True)
class Unsupported:
    """Marker for a method name the service does not implement."""

    method: str

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "not_implemented", "method": self.method}


Response = Union[Success, Failure, Unsupported]


def version_error() -> Failure:
    """Return the failure reported for unreadable application metadata."""
    return Failure(code=VERSION_ERROR, message=VERSION_ERROR_MESSAGE)
