"""Package version and display name, resolved once at import."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["VERSION", "APP_NAME"]

APP_NAME = "TemplateMethod"

# Used when running from a source checkout that was never installed.
_UNINSTALLED_VERSION = "1.0.0"


def _installed_version() -> str:
    try:
        return version("templatemethod")
    except PackageNotFoundError:
        return _UNINSTALLED_VERSION


VERSION = _installed_version()
