"""Lint a MergeRequest before handing it to a compiler.

The compilers never call this: they produce arguments for any request.
"""

import os
from typing import Optional

from mux_builder.common import ValidationResult
from mux_builder.language import LanguageConfig
from mux_builder.models import MergeRequest

SUBTITLE_TEXT_EXTENSIONS = {"ass", "ssa"}


def validate_merge_request(request: MergeRequest, languages: Optional[LanguageConfig] = None) -> ValidationResult:
    """Validate a merge request.

    Errors are for requests no backend can run; warnings flag requests
    that will mux but probably not as intended.
    """
    languages = languages or LanguageConfig()
    result = ValidationResult()

    if not request.output:
        result.add_error("Output path is required")
    elif not request.output_extension:
        result.add_warning(f"Output '{request.output}' has no extension, container is ambiguous")

    tracks = request.video_and_audio + request.video_only + request.audio_only
    for track in tracks:
        if not track.path:
            result.add_error("Track path is required")
    for subtitle in request.subtitles:
        if not subtitle.path:
            result.add_error("Subtitle path is required")

    if not request.video_and_audio and not request.video_only:
        result.add_warning("No video track: output will have no video stream")
    if not request.video_and_audio and not request.audio_only:
        result.add_warning("No audio track: output will have no audio stream")

    if request.video_only and (request.video_and_audio or len(request.video_only) > 1):
        result.add_warning(
            "Only one video track is muxed; additional video-only inputs are ignored"
        )

    if request.wants_mp4:
        if request.fonts:
            result.add_warning("Font attachments are not supported in MP4 output")
        for subtitle in request.subtitles:
            ext = os.path.splitext(subtitle.path)[1].lstrip(".").lower()
            if ext in SUBTITLE_TEXT_EXTENSIONS:
                result.add_warning(
                    f"Subtitle '{subtitle.path}' will be converted to mov_text, styling is lost"
                )

    for track in tracks:
        if not track.literal_language and track.language not in languages.display_names:
            result.add_warning(
                f"No display name for language '{track.language}', track name falls back to its ISO code"
            )

    return result
