"""Per-output merger: compiles one request for either backend and cleans up."""

import logging
import os
from typing import List, Optional

from mux_builder.backend import Backend
from mux_builder.command_generator import format_command
from mux_builder.ffmpeg import generate_ffmpeg_args
from mux_builder.language import LanguageConfig
from mux_builder.mkvmerge import generate_mkvmerge_args
from mux_builder.models import MergeRequest

logger = logging.getLogger(__name__)


class Merger:
    """Wraps a single MergeRequest.

    Not meant to be reused across outputs: build a new Merger per file.
    """

    def __init__(self, request: MergeRequest, languages: Optional[LanguageConfig] = None):
        self.request = request
        self.languages = languages or LanguageConfig()

    def ffmpeg_args(self) -> List[str]:
        return generate_ffmpeg_args(self.request, self.languages)

    def mkvmerge_args(self) -> List[str]:
        return generate_mkvmerge_args(self.request, self.languages)

    def ffmpeg(self) -> str:
        return format_command(self.ffmpeg_args())

    def mkvmerge(self) -> str:
        return format_command(self.mkvmerge_args())

    def compile(self, backend: Backend) -> List[str]:
        if backend == Backend.MKVMERGE:
            return self.mkvmerge_args()
        return self.ffmpeg_args()

    def clean_up(self) -> None:
        """Delete every source file of the request.

        Call only after the backend finished successfully. Errors propagate;
        files removed before a failure stay removed.
        """
        for path in self.request.source_paths():
            logger.debug(f"Removing merged source {path}")
            os.unlink(path)
