"""cursorview: cached, cursor-paginated views over a remote collection API."""

from __future__ import annotations

import warnings
from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "cursorview"
FALLBACK_VERSION = "0.0.0+unknown"

try:
    __version__ = version(DIST_NAME)
except PackageNotFoundError:
    # Running from a source checkout that was never installed.
    warnings.warn(
        f"{DIST_NAME} is not installed; reporting version {FALLBACK_VERSION!r}.",
        RuntimeWarning,
        stacklevel=2,
    )
    __version__ = FALLBACK_VERSION
