"""Track plan types consumed by the mkvmerge and ffmpeg compilers."""

import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TrackInput:
    """A video and/or audio source file."""

    path: str
    language: str
    literal_language: bool = False  # use `language` verbatim, never resolve it


@dataclass
class SubtitleInput:
    """A subtitle file with an optional display title override."""

    path: str
    language: str
    title: Optional[str] = None
    literal_language: bool = False


@dataclass
class Font:
    """A font file to attach to the output container."""

    name: str
    path: str
    mime: str


@dataclass
class MergeRequest:
    """Everything needed to mux one output file.

    Order inside each track list is significant: it decides input indexes
    and which entry becomes the primary video.
    """

    output: str
    video_and_audio: List[TrackInput] = field(default_factory=list)
    video_only: List[TrackInput] = field(default_factory=list)
    audio_only: List[TrackInput] = field(default_factory=list)
    subtitles: List[SubtitleInput] = field(default_factory=list)
    simulcast: bool = False
    skip_subtitle_mux: bool = False
    fonts: List[Font] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.skip_subtitle_mux:
            self.subtitles = []

    @property
    def output_extension(self) -> str:
        return os.path.splitext(self.output)[1].lstrip(".").lower()

    @property
    def wants_mp4(self) -> bool:
        return self.output_extension == "mp4"

    def source_paths(self) -> List[str]:
        """Paths of every track and subtitle file (not fonts, not the output)."""
        paths = [t.path for t in self.audio_only]
        paths.extend(t.path for t in self.video_only)
        paths.extend(t.path for t in self.video_and_audio)
        paths.extend(s.path for s in self.subtitles)
        return paths
