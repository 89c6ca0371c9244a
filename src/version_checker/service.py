"""Version query service.

Maps a method name onto a provider call and packages the outcome as a
``Success``, ``Failure`` or ``Unsupported`` response. Calls are stateless
and independent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from version_checker.config.models import VersionCheckerConfig
from version_checker.core.logging import get_logger
from version_checker.core.models import (
    MethodCall,
    Operation,
    Response,
    Success,
    Unsupported,
    version_error,
)
from version_checker.metadata.base import MetadataError
from version_checker.providers import select_provider
from version_checker.providers.base import PlatformInfoProvider

LOGGER = get_logger(__name__)


class VersionQueryService:
    """Answers getPlatformVersion and getAppVersion requests."""

    def __init__(self, provider: PlatformInfoProvider):
        """Initialize VersionQueryService.

        Args:
            provider: Platform provider that performs the actual queries.
        """
        self.provider = provider

    @classmethod
    def from_config(
        cls,
        config: VersionCheckerConfig,
        project_root: Optional[Path] = None,
    ) -> "VersionQueryService":
        """Create a service wired to the provider selected by configuration.

        Raises:
            ProviderNotFoundError: If the selected provider is not installed.
            ValueError: If the OS is unsupported or the metadata source unknown.
        """
        return cls(select_provider(config, project_root))

    def handle(self, request: Union[MethodCall, str]) -> Response:
        """Handle a single request.

        Args:
            request: The call to answer, or a bare method name.

        Returns:
            Success with the platform string or VersionInfo, Failure with
            VERSION_ERROR when app metadata cannot be read, or Unsupported
            for any other method name.
        """
        if isinstance(request, str):
            request = MethodCall(request)

        operation = request.operation
        if operation is Operation.GET_PLATFORM_VERSION:
            return Success(self.provider.os_version_string())
        if operation is Operation.GET_APP_VERSION:
            return self._app_version()

        LOGGER.debug(f"Unsupported method: {request.method!r}")
        return Unsupported(request.method)

    def _app_version(self) -> Response:
        try:
            return Success(self.provider.app_version_info())
        except MetadataError as e:
            LOGGER.debug(f"App version lookup failed: {e}")
            return version_error()
