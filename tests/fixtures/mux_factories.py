"""
Factory functions for creating mux_builder test data.

Plain constructors with sensible defaults so each test only spells out
the fields it cares about.
"""
import json
from pathlib import Path
from typing import List, Optional

from mux_builder.language import IsoLanguage
from mux_builder.models import Font, MergeRequest, SubtitleInput, TrackInput


def create_iso_table() -> List[IsoLanguage]:
    """Synthetic ISO-639 table covering the languages used in tests."""
    return [
        IsoLanguage(alpha_2="en", alpha_3="eng", name="English"),
        IsoLanguage(alpha_2="es", alpha_3="spa", name="Spanish"),
        IsoLanguage(alpha_2="pt", alpha_3="por", name="Portuguese"),
        IsoLanguage(alpha_2="ja", alpha_3="jpn", name="Japanese"),
        IsoLanguage(alpha_2="de", alpha_3="ger", name="German"),
        IsoLanguage(alpha_2="zh", alpha_3="chi", name="Chinese"),
        IsoLanguage(alpha_2=None, alpha_3="ain", name="Ainu"),
    ]


def create_track(
    path: str = "/media/video.mkv",
    language: str = "en",
    literal_language: bool = False,
) -> TrackInput:
    """Create a video/audio track input."""
    return TrackInput(path=path, language=language, literal_language=literal_language)


def create_subtitle(
    path: str = "/media/subs.ass",
    language: str = "en",
    title: Optional[str] = None,
    literal_language: bool = False,
) -> SubtitleInput:
    """Create a subtitle input."""
    return SubtitleInput(
        path=path, language=language, title=title, literal_language=literal_language,
    )


def create_font(
    name: str = "arial.ttf",
    path: str = "/fonts/arial.ttf",
    mime: str = "application/x-truetype-font",
) -> Font:
    return Font(name=name, path=path, mime=mime)


def create_merge_request(
    output: str = "/media/output.mkv",
    video_and_audio: Optional[List[TrackInput]] = None,
    video_only: Optional[List[TrackInput]] = None,
    audio_only: Optional[List[TrackInput]] = None,
    subtitles: Optional[List[SubtitleInput]] = None,
    simulcast: bool = False,
    skip_subtitle_mux: bool = False,
    fonts: Optional[List[Font]] = None,
) -> MergeRequest:
    """Create a merge request; every track list defaults to empty."""
    return MergeRequest(
        output=output,
        video_and_audio=video_and_audio or [],
        video_only=video_only or [],
        audio_only=audio_only or [],
        subtitles=subtitles or [],
        simulcast=simulcast,
        skip_subtitle_mux=skip_subtitle_mux,
        fonts=fonts or [],
    )


def create_plan_dict(output: str = "out.mkv", **kwargs) -> dict:
    """Create a JSON-serialisable plan with one muxed video+audio input."""
    plan = {
        "output": output,
        "video_and_audio": [{"path": "a.mkv", "language": "en"}],
    }
    plan.update(kwargs)
    return plan


def write_plan(directory: Path, plan: dict, name: str = "plan.json") -> Path:
    path = Path(directory) / name
    path.write_text(json.dumps(plan), encoding="utf-8")
    return path


def write_font(directory: Path, file_name: str, size: int = 128) -> Path:
    """Write a dummy font file of `size` bytes."""
    path = Path(directory) / file_name
    path.write_bytes(b"\0" * size)
    return path


def count_flag(args: List[str], flag: str) -> int:
    return sum(1 for a in args if a == flag)


def flag_values(args: List[str], flag: str) -> List[str]:
    """Values following each occurrence of `flag` in an argument list."""
    return [args[i + 1] for i, a in enumerate(args[:-1]) if a == flag]
