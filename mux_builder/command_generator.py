"""Full command generation from a merger and a backend selection."""

import shlex
from typing import TYPE_CHECKING, List, Optional, Sequence

from mux_builder.backend import Backend, BackendSelection

if TYPE_CHECKING:
    from mux_builder.merger import Merger


def generate_command(binary: str, args: Sequence[str]) -> List[str]:
    """Prefix compiled arguments with the backend binary."""
    return [binary, *args]


def format_command(tokens: Sequence[str]) -> str:
    """Flatten a token list into a single POSIX shell command line."""
    return shlex.join(str(t) for t in tokens)


def choose_backend(selection: BackendSelection, use_mp4: bool) -> Optional[Backend]:
    """Backend to compile for. MP4 output always goes through ffmpeg."""
    if use_mp4:
        return Backend.FFMPEG if selection.ffmpeg else None
    return selection.primary


def build_merge_command(merger: "Merger", selection: BackendSelection) -> Optional[List[str]]:
    """Full argv for the merger's request, or None when no backend is usable."""
    backend = choose_backend(selection, merger.request.wants_mp4)
    if backend is None:
        return None
    return generate_command(selection.binary(backend), merger.compile(backend))
