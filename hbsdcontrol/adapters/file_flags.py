"""System immutable flag handling through chflags(2)."""

from __future__ import annotations

import os
import stat

from ..core.errors import AttributeStoreFailure, FileNotFound, HbsdControlError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class FileFlagsAdapter:
    """Set and clear SF_IMMUTABLE (schg) on a file."""

    def _require_chflags(self) -> None:
        if not hasattr(os, "chflags") or not hasattr(stat, "SF_IMMUTABLE"):
            raise HbsdControlError("file flags are not supported on this platform")

    def _flags(self, path: str) -> int:
        try:
            return getattr(os.stat(path), "st_flags", 0)
        except FileNotFoundError:
            raise FileNotFound(path) from None

    def _chflags(self, path: str, flags: int) -> None:
        try:
            os.chflags(path, flags)
        except FileNotFoundError:
            raise FileNotFound(path) from None
        except OSError as exc:
            raise AttributeStoreFailure("chflags", path, errno=exc.errno) from exc

    def is_immutable(self, path: str) -> bool:
        self._require_chflags()
        return bool(self._flags(path) & stat.SF_IMMUTABLE)

    def set_immutable(self, path: str) -> None:
        self._require_chflags()
        self._chflags(path, self._flags(path) | stat.SF_IMMUTABLE)
        logger.info(f"{path}: set schg")

    def clear_immutable(self, path: str) -> None:
        self._require_chflags()
        self._chflags(path, self._flags(path) & ~stat.SF_IMMUTABLE)
        logger.info(f"{path}: cleared schg")
