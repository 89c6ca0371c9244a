"""Bridge between CLI arguments and configuration overrides."""

from __future__ import annotations

from argparse import Namespace
from typing import Any, Dict

# CLI attribute name -> key under the ``app`` config section
_APP_OPTIONS = {
    "source": "source",
    "distribution": "distribution",
    "bundle_path": "bundle_path",
    "manifest_path": "manifest_path",
}


class ConfigBridge:
    """Converts parsed CLI flags into a config override dict."""

    @staticmethod
    def args_to_overrides(args: Namespace) -> Dict[str, Any]:
        """Build config overrides from CLI arguments.

        Only flags the user actually set are included, so unset flags never
        mask values from config files.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Dictionary suitable for merging on top of file configuration.
        """
        overrides: Dict[str, Any] = {}

        platform = getattr(args, "platform", None)
        if platform:
            overrides["platform"] = platform

        app: Dict[str, Any] = {}
        for attr, key in _APP_OPTIONS.items():
            value = getattr(args, attr, None)
            if value is not None:
                app[key] = str(value)
        if app:
            overrides["app"] = app

        return overrides
