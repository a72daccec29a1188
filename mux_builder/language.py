"""
Language code resolution and track naming.

Tracks carry 2-letter (ISO 639-1) codes; both backends want 3-letter
ISO 639-2 codes. The ISO table is injected so tests can run against a
synthetic one; by default it is built from pycountry.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

import pycountry

from mux_builder.models import SubtitleInput, TrackInput

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "eng"

# "cmn" has no 639-1 entry, so it never matches the table
MANDARIN_CODE = "cmn"
CHINESE_CODE = "chi"

SIMULCAST_SUFFIX = " [Simulcast]"
UNCUT_SUFFIX = " [Uncut]"

DEFAULT_DISPLAY_NAMES: Dict[str, str] = {
    "en": "English (United State)",
    "es": "Español (Latinoamericano)",
    "pt": "Português (Brasil)",
    "ja": "日本語",
    "cmn": "官話",
}


@dataclass(frozen=True)
class IsoLanguage:
    """One ISO-639 entry. `alpha_2` is None for languages without a 639-1 code."""

    alpha_2: Optional[str]
    alpha_3: str
    name: str = ""


IsoTable = Sequence[IsoLanguage]


@lru_cache(maxsize=1)
def load_iso639_table() -> Tuple[IsoLanguage, ...]:
    """Build the ISO-639 table from pycountry.

    The bibliographic code is preferred over the terminology one
    (German is "ger", not "deu") since that is what Matroska tags use.
    """
    entries = []
    for lang in pycountry.languages:
        alpha_3 = getattr(lang, "bibliographic", None) or lang.alpha_3
        entries.append(IsoLanguage(
            alpha_2=getattr(lang, "alpha_2", None),
            alpha_3=alpha_3,
            name=getattr(lang, "name", ""),
        ))
    logger.debug(f"Loaded {len(entries)} ISO-639 entries from pycountry")
    return tuple(entries)


def get_language_code(
    code: str,
    fallback: str = DEFAULT_LANGUAGE,
    table: Optional[IsoTable] = None,
) -> str:
    """Resolve a 2-letter language code to its 3-letter ISO 639-2 code.

    Returns `fallback` unchanged when the table has no matching entry.
    """
    if code == MANDARIN_CODE:
        return CHINESE_CODE
    if table is None:
        table = load_iso639_table()
    for entry in table:
        if entry.alpha_2 is not None and entry.alpha_2 == code:
            return entry.alpha_3
    return fallback


@dataclass
class LanguageConfig:
    """Lookup tables handed to the compilers.

    `iso_table=None` means the pycountry table.
    """

    iso_table: Optional[IsoTable] = None
    display_names: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_DISPLAY_NAMES)
    )

    def resolve(self, code: str, fallback: str = DEFAULT_LANGUAGE) -> str:
        return get_language_code(code, fallback, self.iso_table)

    def resolve_track(self, track: TrackInput) -> str:
        """Language tag for an audio/video track; unknown codes pass through."""
        if track.literal_language:
            return track.language
        return self.resolve(track.language, track.language)

    def resolve_subtitle(self, subtitle: SubtitleInput) -> str:
        """Language tag for a subtitle; unknown codes become the default language."""
        if subtitle.literal_language:
            return subtitle.language
        return self.resolve(subtitle.language)

    def subtitle_title(self, subtitle: SubtitleInput) -> str:
        if subtitle.title is not None:
            return subtitle.title
        return self.resolve_subtitle(subtitle)

    def display_name(self, code: str) -> str:
        name = self.display_names.get(code)
        if name is None:
            # No human-readable entry: use the ISO code rather than nothing
            name = self.resolve(code, code)
            logger.debug(f"No display name for '{code}', using '{name}'")
        return name

    def track_name(self, track: TrackInput, simulcast: bool) -> str:
        """mkvmerge track name, e.g. "English (United State) [Uncut]"."""
        if track.literal_language:
            base = track.language
        else:
            base = self.display_name(track.language)
        return base + (SIMULCAST_SUFFIX if simulcast else UNCUT_SUFFIX)
