"""JSON track plan files.

A plan describes one output file:

    {
      "output": "out.mkv",
      "video_and_audio": [{"path": "a.mkv", "language": "en"}],
      "subtitles": [{"path": "s.ass", "language": "es"}],
      "subtitle_fonts": [{"language": "es", "fonts": ["Arial"]}]
    }
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from mux_builder.fonts import SubtitleFonts, make_fonts_list
from mux_builder.models import MergeRequest, SubtitleInput, TrackInput


class TrackModel(BaseModel):
    path: str
    language: str
    literal_language: bool = False

    def to_track(self) -> TrackInput:
        return TrackInput(
            path=self.path,
            language=self.language,
            literal_language=self.literal_language,
        )


class SubtitleModel(BaseModel):
    path: str
    language: str
    title: Optional[str] = None
    literal_language: bool = False

    def to_subtitle(self) -> SubtitleInput:
        return SubtitleInput(
            path=self.path,
            language=self.language,
            title=self.title,
            literal_language=self.literal_language,
        )


class SubtitleFontsModel(BaseModel):
    language: str
    fonts: List[str] = []


class MergePlan(BaseModel):
    """Plan for one output file."""

    output: str
    video_and_audio: List[TrackModel] = []
    video_only: List[TrackModel] = []
    audio_only: List[TrackModel] = []
    subtitles: List[SubtitleModel] = []
    subtitle_fonts: List[SubtitleFontsModel] = []
    # None means "use the settings value"
    simulcast: Optional[bool] = None
    skip_subtitle_mux: Optional[bool] = None

    def to_request(
        self,
        fonts_dir: str,
        font_table: Optional[Dict[str, str]] = None,
        simulcast: bool = False,
        skip_subtitle_mux: bool = False,
    ) -> MergeRequest:
        """Build a MergeRequest, resolving subtitle fonts inside `fonts_dir`."""
        fonts = make_fonts_list(
            fonts_dir,
            [SubtitleFonts(language=s.language, fonts=list(s.fonts)) for s in self.subtitle_fonts],
            font_table,
        )
        return MergeRequest(
            output=self.output,
            video_and_audio=[t.to_track() for t in self.video_and_audio],
            video_only=[t.to_track() for t in self.video_only],
            audio_only=[t.to_track() for t in self.audio_only],
            subtitles=[s.to_subtitle() for s in self.subtitles],
            simulcast=self.simulcast if self.simulcast is not None else simulcast,
            skip_subtitle_mux=(
                self.skip_subtitle_mux if self.skip_subtitle_mux is not None else skip_subtitle_mux
            ),
            fonts=fonts,
        )


def load_plan(path: Union[str, Path]) -> MergePlan:
    """Parse a plan file. Raises pydantic.ValidationError on bad content."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return MergePlan.model_validate(data)
