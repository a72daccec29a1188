"""Resolve the fonts required by subtitles to attachable files."""

import logging
import mimetypes
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from mux_builder.models import Font

logger = logging.getLogger(__name__)

# Font name as referenced by ASS styles -> file name inside the fonts directory
DEFAULT_FONT_TABLE: Dict[str, str] = {
    "Arial": "arial.ttf",
    "Arial Bold": "arialbd.ttf",
    "Arial Black": "ariblk.ttf",
    "Arial Italic": "ariali.ttf",
    "Comic Sans MS": "comic.ttf",
    "Courier New": "cour.ttf",
    "Georgia": "georgia.ttf",
    "Impact": "impact.ttf",
    "Tahoma": "tahoma.ttf",
    "Times New Roman": "times.ttf",
    "Trebuchet MS": "trebuc.ttf",
    "Verdana": "verdana.ttf",
    "Webdings": "webdings.ttf",
}

FONT_MIME_TYPES: Dict[str, str] = {
    ".ttf": "application/x-truetype-font",
    ".ttc": "application/x-truetype-font",
    ".otf": "application/vnd.ms-opentype",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}

FALLBACK_MIME = "application/octet-stream"

MimeLookup = Callable[[str], str]


@dataclass
class SubtitleFonts:
    """Fonts referenced by one subtitle track."""

    language: str
    fonts: List[str] = field(default_factory=list)


def font_mime(file_name: str) -> str:
    """MIME type for a font file, keyed on its extension."""
    ext = os.path.splitext(file_name)[1].lower()
    mime = FONT_MIME_TYPES.get(ext)
    if mime:
        return mime
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or FALLBACK_MIME


def _required_font_names(subtitles: Sequence[SubtitleFonts]) -> List[str]:
    names: List[str] = []
    for sub in subtitles:
        names.extend(sub.fonts)
    return list(dict.fromkeys(names))


def make_fonts_list(
    fonts_dir: str,
    subtitles: Sequence[SubtitleFonts],
    font_table: Optional[Dict[str, str]] = None,
    mime_lookup: MimeLookup = font_mime,
) -> List[Font]:
    """Collect the fonts needed by `subtitles` that exist in `fonts_dir`.

    Unknown font names, missing files and zero-byte files are skipped
    without error.
    """
    if font_table is None:
        font_table = DEFAULT_FONT_TABLE

    names = _required_font_names(subtitles)
    if subtitles:
        languages = [sub.language for sub in subtitles]
        logger.info(f"Subtitles: {', '.join(languages)} (Total: {len(languages)})")
    if names:
        logger.info(f"Required fonts: {', '.join(names)} (Total: {len(names)})")

    fonts: List[Font] = []
    for name in names:
        file_name = font_table.get(name)
        if not file_name:
            logger.debug(f"Font '{name}' is not in the font table")
            continue
        font_path = os.path.join(fonts_dir, file_name)
        if not os.path.isfile(font_path) or os.path.getsize(font_path) == 0:
            logger.debug(f"Font file missing or empty: {font_path}")
            continue
        fonts.append(Font(name=file_name, path=font_path, mime=mime_lookup(file_name)))

    return fonts
