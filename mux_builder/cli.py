"""Command line entry point: print the mux command for a plan file."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from mux_builder.backend import Backend, select_backend
from mux_builder.command_generator import build_merge_command, format_command, generate_command
from mux_builder.config import load_settings, set_log_level
from mux_builder.log_utils import configure_logging
from mux_builder.merger import Merger
from mux_builder.plan import load_plan
from mux_builder.validation import validate_merge_request

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_BACKEND = 1
EXIT_BAD_PLAN = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mux-builder",
        description="Compile a track plan into an mkvmerge or ffmpeg command.",
    )
    parser.add_argument("plan", help="JSON plan file describing one output")
    parser.add_argument(
        "--backend",
        choices=["auto", Backend.FFMPEG.value, Backend.MKVMERGE.value],
        default="auto",
        help="backend to compile for (default: pick from available binaries)",
    )
    parser.add_argument("--ffmpeg", help="path to the ffmpeg binary")
    parser.add_argument("--mkvmerge", help="path to the mkvmerge binary")
    parser.add_argument("--settings", type=Path, help="JSON settings file")
    parser.add_argument("--fonts-dir", help="directory holding subtitle fonts")
    parser.add_argument("--mp4", action="store_true", help="mux into MP4 (ffmpeg only)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument(
        "--lint",
        action="store_true",
        help="log validation warnings and refuse plans with errors",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = load_settings(args.settings)
    level = args.log_level or settings.log_level
    configure_logging(level)
    set_log_level(level)

    binaries = settings.binaries()
    if args.ffmpeg:
        binaries.ffmpeg = args.ffmpeg
    if args.mkvmerge:
        binaries.mkvmerge = args.mkvmerge

    try:
        plan = load_plan(args.plan)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Invalid plan {args.plan}: {e}")
        return EXIT_BAD_PLAN

    if args.mp4 or settings.use_mp4:
        plan.output = str(Path(plan.output).with_suffix(".mp4"))

    request = plan.to_request(
        args.fonts_dir or settings.fonts_dir,
        settings.font_table,
        simulcast=settings.simulcast,
        skip_subtitle_mux=settings.skip_subtitle_mux,
    )
    languages = settings.language_config()

    if args.lint:
        result = validate_merge_request(request, languages)
        for warning in result.warnings:
            logger.warning(warning)
        if not result.valid:
            for error in result.errors:
                logger.error(error)
            return EXIT_BAD_PLAN

    selection = select_backend(binaries, request.wants_mp4)
    if selection.is_empty:
        return EXIT_NO_BACKEND

    merger = Merger(request, languages)
    if args.backend == "auto":
        command = build_merge_command(merger, selection)
    else:
        backend = Backend(args.backend)
        binary = selection.binary(backend)
        command = None
        if binary:
            command = generate_command(binary, merger.compile(backend))
        else:
            logger.warning(f"{backend.value} is not usable for {request.output}")

    if command is None:
        return EXIT_NO_BACKEND

    print(format_command(command))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
