"""
Unit tests for full command generation.
"""
from mux_builder.backend import Backend, BackendSelection
from mux_builder.command_generator import (
    build_merge_command,
    choose_backend,
    format_command,
    generate_command,
)
from mux_builder.merger import Merger

from tests.fixtures.mux_factories import create_merge_request, create_track


class TestGenerateCommand:
    def test_prefixes_binary(self):
        assert generate_command("/usr/bin/mkvmerge", ["-o", "out.mkv"]) == [
            "/usr/bin/mkvmerge", "-o", "out.mkv",
        ]

    def test_does_not_mutate_args(self):
        args = ["-o", "out.mkv"]
        generate_command("mkvmerge", args)
        assert args == ["-o", "out.mkv"]


class TestFormatCommand:
    def test_plain_tokens(self):
        assert format_command(["ffmpeg", "-i", "a.mkv", "out.mkv"]) == "ffmpeg -i a.mkv out.mkv"

    def test_quotes_spaces_and_brackets(self):
        cmd = format_command(["mkvmerge", "--track-name", "0:English [Uncut]", "my file.mkv"])
        assert cmd == "mkvmerge --track-name '0:English [Uncut]' 'my file.mkv'"

    def test_quotes_single_quotes(self):
        assert format_command(["a", "it's"]) == "a 'it'\"'\"'s'"


class TestChooseBackend:
    def test_mp4_requires_ffmpeg(self):
        assert choose_backend(BackendSelection(ffmpeg="ffmpeg"), use_mp4=True) == Backend.FFMPEG
        assert choose_backend(BackendSelection(mkvmerge="mkvmerge"), use_mp4=True) is None

    def test_matroska_prefers_mkvmerge(self):
        selection = BackendSelection(mkvmerge="mkvmerge", ffmpeg="ffmpeg")
        assert choose_backend(selection, use_mp4=False) == Backend.MKVMERGE

    def test_empty_selection(self):
        assert choose_backend(BackendSelection(), use_mp4=False) is None


class TestBuildMergeCommand:
    def test_mkvmerge_command(self, languages):
        merger = Merger(create_merge_request(output="out.mkv", video_and_audio=[create_track()]), languages)
        selection = BackendSelection(mkvmerge="/bin/mkvmerge", ffmpeg="/bin/ffmpeg")

        command = build_merge_command(merger, selection)

        assert command[0] == "/bin/mkvmerge"
        assert command[1:] == merger.mkvmerge_args()

    def test_ffmpeg_fallback_for_matroska(self, languages):
        merger = Merger(create_merge_request(output="out.mkv", video_and_audio=[create_track()]), languages)

        command = build_merge_command(merger, BackendSelection(ffmpeg="/bin/ffmpeg"))

        assert command == ["/bin/ffmpeg"] + merger.ffmpeg_args()

    def test_mp4_uses_ffmpeg(self, languages):
        merger = Merger(create_merge_request(output="out.mp4", video_and_audio=[create_track()]), languages)

        command = build_merge_command(merger, BackendSelection(ffmpeg="/bin/ffmpeg"))

        assert command[0] == "/bin/ffmpeg"
        assert "mov_text" in command

    def test_empty_selection_returns_none(self, languages):
        merger = Merger(create_merge_request(), languages)
        assert build_merge_command(merger, BackendSelection()) is None
