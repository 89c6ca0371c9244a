"""version-checker: OS and application version queries behind one interface."""

from __future__ import annotations

from version_checker.core.models import (
    Failure,
    MethodCall,
    Operation,
    Response,
    Success,
    Unsupported,
    VersionInfo,
)
from version_checker.service import VersionQueryService

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Failure",
    "MethodCall",
    "Operation",
    "Response",
    "Success",
    "Unsupported",
    "VersionInfo",
    "VersionQueryService",
]
