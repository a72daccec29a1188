"""ffmpeg argument generation for a MergeRequest.

ffmpeg addresses streams by input index, so every ``-i`` slot is counted.
The primary video is the first video-bearing input in the order
video_and_audio, then video_only.
"""

from typing import List, Optional

from mux_builder.language import LanguageConfig
from mux_builder.models import MergeRequest

VIDEO_STREAM_TITLE = "[Video Stream]"

# Subtitle codec per output container
MP4_SUBTITLE_CODEC = "mov_text"
DEFAULT_SUBTITLE_CODEC = "ass"


def subtitle_codec_for(request: MergeRequest) -> str:
    if request.wants_mp4:
        return MP4_SUBTITLE_CODEC
    return DEFAULT_SUBTITLE_CODEC


def _audio_language_flags(audio_index: int, language: str) -> List[str]:
    return [f"-metadata:s:a:{audio_index}", f"language={language}"]


def _video_title_flags() -> List[str]:
    # Only one video stream is ever mapped, so it is always output stream v:0
    return ["-metadata:s:v:0", f"title={VIDEO_STREAM_TITLE}"]


def generate_ffmpeg_args(
    request: MergeRequest, languages: Optional[LanguageConfig] = None
) -> List[str]:
    """Generate ffmpeg arguments (without the binary) for a merge request.

    Order: inputs, map/metadata block, subtitle maps, codecs,
    subtitle metadata, output path.
    """
    languages = languages or LanguageConfig()
    inputs: List[str] = []
    metadata: List[str] = []

    index = 0
    audio_index = 0
    has_video = False

    for track in request.video_and_audio:
        inputs.extend(["-i", track.path])
        if not has_video:
            metadata.extend(["-map", f"{index}:a", "-map", f"{index}:v"])
            metadata.extend(_audio_language_flags(audio_index, languages.resolve_track(track)))
            metadata.extend(_video_title_flags())
            has_video = True
        else:
            metadata.extend(["-map", f"{index}:a"])
            metadata.extend(_audio_language_flags(audio_index, languages.resolve_track(track)))
        audio_index += 1
        index += 1

    for track in request.video_only:
        if has_video:
            continue
        inputs.extend(["-i", track.path])
        metadata.extend(["-map", f"{index}", "-map", f"-{index}:a"])
        metadata.extend(_video_title_flags())
        has_video = True
        index += 1

    for track in request.audio_only:
        inputs.extend(["-i", track.path])
        metadata.extend(["-map", f"{index}"])
        metadata.extend(_audio_language_flags(audio_index, languages.resolve_track(track)))
        audio_index += 1
        index += 1

    for subtitle in request.subtitles:
        inputs.extend(["-i", subtitle.path])

    args: List[str] = list(inputs)
    args.extend(metadata)
    for offset in range(len(request.subtitles)):
        args.extend(["-map", f"{index + offset}"])

    args.extend(["-c:v", "copy", "-c:a", "copy"])
    args.extend(["-c:s", subtitle_codec_for(request)])

    for offset, subtitle in enumerate(request.subtitles):
        args.extend([f"-metadata:s:s:{offset}", f"title={languages.subtitle_title(subtitle)}"])
        args.extend([f"-metadata:s:s:{offset}", f"language={languages.resolve_subtitle(subtitle)}"])

    # Output path is always last
    args.append(request.output)
    return args
