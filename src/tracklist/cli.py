from __future__ import annotations
from argparse import (
    ArgumentParser,
    ArgumentTypeError,
    ArgumentDefaultsHelpFormatter,
    RawTextHelpFormatter,
)
from json import JSONDecodeError
from pathlib import Path
from .config import Config
from .loader import TrackFileError, fill_playlist, load_tracks
from .models import format_duration
from .playlist import BoundedTrackList
from .utils.logging import setup_logging
from .utils.cli import positive_int, looks_like_track_file

logger = setup_logging(__name__)


class HelpFormatter(ArgumentDefaultsHelpFormatter, RawTextHelpFormatter):
    pass


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="tracklist",
        description=(
            "Tracklist - fixed-capacity track lists\n\n"
            "Examples:\n"
            "  tracklist tracks.csv\n"
            "  tracklist tracks.json --capacity 10 --sort\n"
            "  tracklist tracks.csv --remove 'Yesterday' --remove 'Imagine'\n"
        ),
        formatter_class=HelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version="Tracklist 0.1.0",
        help="Show version and exit.",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Track file: .json list of objects, or .csv/.txt rows of artist,title,duration.",
    )
    parser.add_argument(
        "--capacity",
        type=positive_int,
        help="Maximum number of tracks. Defaults to the configured capacity.",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort the list by increasing duration before printing.",
    )
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="TITLE",
        help="Remove the first track with this title (case-insensitive). Repeatable.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the loading progress bar.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = get_parser()
    args = parser.parse_args(argv)

    config = load_config()

    if not looks_like_track_file(args.file):
        logger.error(f"Unsupported track file: {args.file}")
        raise SystemExit(1)

    capacity = resolve_capacity(args, config)
    show_progress = bool(config.data.get("show_progress", True)) and not args.quiet

    playlist = build_playlist(args.file, capacity, show_progress)
    apply_edits(playlist, args.remove, args.sort)
    print(render_summary(playlist))


def load_config() -> Config:
    try:
        return Config()
    except JSONDecodeError as e:
        logger.error(f"Config file is not valid JSON: {e}")
        raise SystemExit(1)


def resolve_capacity(args, config: Config) -> int:
    if args.capacity:
        return args.capacity
    value = config.data.get("default_capacity", 50)
    try:
        return positive_int(str(value))
    except ArgumentTypeError:
        logger.error(f"Invalid default_capacity in config: {value!r}")
        raise SystemExit(1)


def build_playlist(path: Path, capacity: int, show_progress: bool) -> BoundedTrackList:
    try:
        tracks = load_tracks(path, show_progress=show_progress)
    except FileNotFoundError:
        logger.error(f"Track file not found: {path}")
        raise SystemExit(1)
    except TrackFileError as e:
        logger.error(str(e))
        raise SystemExit(1)

    playlist = BoundedTrackList(capacity)
    added = fill_playlist(playlist, tracks)
    if added < len(tracks):
        print(f"Only the first {added} of {len(tracks)} tracks fit (capacity {capacity}).")
    return playlist


def apply_edits(playlist: BoundedTrackList, titles: list[str], sort: bool) -> None:
    for title in titles:
        if playlist.index_of(title) == -1:
            logger.info(f"No track titled '{title}' to remove.")
        playlist.remove_by_title(title)
    if sort:
        playlist.sort_by_duration_ascending()


def render_summary(playlist: BoundedTrackList) -> str:
    lines = [
        f"Tracks ({playlist.length}/{playlist.capacity}):{playlist.describe()}",
        f"Total duration: {format_duration(playlist.total_duration())}",
    ]
    if not playlist.is_empty():
        lines.append(f"Shortest track: {playlist.title_of_shortest()}")
    return "\n".join(lines)
