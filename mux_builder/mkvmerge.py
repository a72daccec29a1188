"""mkvmerge argument generation for a MergeRequest.

mkvmerge options apply to the file name that follows them, so each track
contributes a block of per-file flags ending in its path. The primary video
is the first video_only entry, or failing that the first video_and_audio
entry; later video_and_audio entries contribute audio only.
"""

from typing import List, Optional

from mux_builder.language import LanguageConfig
from mux_builder.models import Font, MergeRequest, SubtitleInput, TrackInput

# Keep output byte-identical between runs
GLOBAL_FLAGS = [
    "--no-date",
    "--disable-track-statistics-tags",
    "--engage", "no_variable_data",
]


def _video_only_flags(track: TrackInput, name: str, language: str) -> List[str]:
    return [
        "--video-tracks", "0",
        "--no-audio",
        "--track-name", f"0:{name}",
        "--language", f"0:{language}",
        track.path,
    ]


def _video_and_audio_flags(track: TrackInput, name: str, language: str) -> List[str]:
    return [
        "--video-tracks", "0",
        "--audio-tracks", "1",
        "--track-name", f"0:{name}",
        "--track-name", f"1:{name}",
        "--language", f"1:{language}",
        track.path,
    ]


def _secondary_audio_flags(track: TrackInput, name: str, language: str) -> List[str]:
    """Audio track of a muxed file whose video is not used."""
    return [
        "--no-video",
        "--audio-tracks", "1",
        "--track-name", f"1:{name}",
        "--language", f"1:{language}",
        track.path,
    ]


def _audio_only_flags(track: TrackInput, name: str, language: str) -> List[str]:
    return [
        "--track-name", f"0:{name}",
        "--language", f"0:{language}",
        "--no-video",
        "--audio-tracks", "0",
        track.path,
    ]


def generate_subtitle_flags(
    subtitles: List[SubtitleInput], languages: LanguageConfig
) -> List[str]:
    if not subtitles:
        return ["--no-subtitles"]

    flags: List[str] = []
    for subtitle in subtitles:
        flags.extend(["--track-name", f"0:{languages.subtitle_title(subtitle)}"])
        flags.extend(["--language", f"0:{languages.resolve_subtitle(subtitle)}"])
        flags.append(subtitle.path)
    return flags


def generate_attachment_flags(fonts: List[Font]) -> List[str]:
    if not fonts:
        return ["--no-attachments"]

    flags: List[str] = []
    for font in fonts:
        flags.extend([
            "--attachment-name", font.name,
            "--attachment-mime-type", font.mime,
            "--attach-file", font.path,
        ])
    return flags


def generate_mkvmerge_args(
    request: MergeRequest, languages: Optional[LanguageConfig] = None
) -> List[str]:
    """Generate mkvmerge arguments (without the binary) for a merge request.

    Order: output and global flags, video block, audio-only blocks,
    subtitle block, attachment block.
    """
    languages = languages or LanguageConfig()
    args: List[str] = ["-o", request.output]
    args.extend(GLOBAL_FLAGS)

    has_video = False

    for track in request.video_only:
        if has_video:
            continue
        name = languages.track_name(track, request.simulcast)
        args.extend(_video_only_flags(track, name, languages.resolve_track(track)))
        has_video = True

    for track in request.video_and_audio:
        name = languages.track_name(track, request.simulcast)
        language = languages.resolve_track(track)
        if not has_video:
            args.extend(_video_and_audio_flags(track, name, language))
            has_video = True
        else:
            args.extend(_secondary_audio_flags(track, name, language))

    for track in request.audio_only:
        name = languages.track_name(track, request.simulcast)
        args.extend(_audio_only_flags(track, name, languages.resolve_track(track)))

    args.extend(generate_subtitle_flags(request.subtitles, languages))
    args.extend(generate_attachment_flags(request.fonts))
    return args
