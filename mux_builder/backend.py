"""Pick the mux backend(s) usable for a container from the available binaries."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Backend(str, Enum):
    FFMPEG = "ffmpeg"
    MKVMERGE = "mkvmerge"


@dataclass
class BinaryPaths:
    """Locations of the backend binaries; None when not installed."""

    ffmpeg: Optional[str] = None
    mkvmerge: Optional[str] = None


@dataclass
class BackendSelection:
    """Usable backends. Empty means muxing must be skipped."""

    mkvmerge: Optional[str] = None
    ffmpeg: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.mkvmerge and not self.ffmpeg

    @property
    def primary(self) -> Optional[Backend]:
        """mkvmerge when available, otherwise ffmpeg."""
        if self.mkvmerge:
            return Backend.MKVMERGE
        if self.ffmpeg:
            return Backend.FFMPEG
        return None

    def binary(self, backend: Backend) -> Optional[str]:
        if backend == Backend.MKVMERGE:
            return self.mkvmerge
        return self.ffmpeg


def select_backend(binaries: BinaryPaths, use_mp4: bool) -> BackendSelection:
    """Choose backends for the requested container.

    MP4 output needs ffmpeg. Anything else can use mkvmerge or ffmpeg;
    both are returned so the caller can fall back.
    """
    if use_mp4:
        if binaries.ffmpeg:
            return BackendSelection(ffmpeg=binaries.ffmpeg)
        logger.warning("FFmpeg not found, skip muxing...")
        return BackendSelection()

    if binaries.mkvmerge or binaries.ffmpeg:
        return BackendSelection(mkvmerge=binaries.mkvmerge, ffmpeg=binaries.ffmpeg)
    logger.warning("MKVMerge not found, skip muxing...")
    return BackendSelection()
