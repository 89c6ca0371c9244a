"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Optional

import pytest

from version_checker.core.models import VersionInfo
from version_checker.metadata.base import AppMetadataSource, MetadataNotFoundError
from version_checker.providers.base import PlatformInfoProvider


class StaticMetadataSource(AppMetadataSource):
    """Metadata source returning fixed values, or failing when info is None."""

    def __init__(self, info: Optional[VersionInfo]):
        self.info = info
        self.reads = 0

    @property
    def name(self) -> str:
        return "static"

    def read(self) -> VersionInfo:
        self.reads += 1
        if self.info is None:
            raise MetadataNotFoundError("no metadata")
        return self.info


class FixedProvider(PlatformInfoProvider):
    """Provider reporting a fixed OS version."""

    @property
    def name(self) -> str:
        return "fixed"

    @property
    def platform_name(self) -> str:
        return "TestOS"

    def os_version(self) -> str:
        return "1.0"


@pytest.fixture
def app_info() -> VersionInfo:
    return VersionInfo(version="1.2.3", build_number="45")


@pytest.fixture
def provider(app_info: VersionInfo) -> FixedProvider:
    return FixedProvider(StaticMetadataSource(app_info))


@pytest.fixture
def failing_provider() -> FixedProvider:
    return FixedProvider(StaticMetadataSource(None))
