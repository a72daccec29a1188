"""
Mux Builder - argument compilation for mkvmerge and ffmpeg remuxing.

Turns an ordered plan of video, audio, subtitle and font tracks into the
exact argument list for one of the two backends. Nothing here runs them.
"""

from mux_builder.backend import Backend, BackendSelection, BinaryPaths, select_backend
from mux_builder.common import InvalidMergeRequest, ValidationResult
from mux_builder.language import LanguageConfig, get_language_code
from mux_builder.merger import Merger
from mux_builder.models import Font, MergeRequest, SubtitleInput, TrackInput

__all__ = [
    "Backend",
    "BackendSelection",
    "BinaryPaths",
    "Font",
    "InvalidMergeRequest",
    "LanguageConfig",
    "MergeRequest",
    "Merger",
    "SubtitleInput",
    "TrackInput",
    "ValidationResult",
    "get_language_code",
    "select_backend",
]
