from __future__ import annotations
from csv import reader
from json import loads, JSONDecodeError
from pathlib import Path
from typing import Any, Iterable, List, Tuple
from tqdm import tqdm
from .models import Track
from .playlist import BoundedTrackList
from .utils.logging import setup_logging

logger = setup_logging(__name__)


class TrackFileError(ValueError):
    def __init__(self, path: Path, row: int | None, reason: str) -> None:
        self.path = path
        self.row = row
        where = f"{path}" if row is None else f"{path}, row {row}"
        super().__init__(f"Invalid track file ({where}): {reason}")


def _parse_json(path: Path, text: str) -> List[Tuple[int, Any]]:
    try:
        data = loads(text)
    except JSONDecodeError as e:
        raise TrackFileError(path, None, str(e)) from e
    if not isinstance(data, list):
        raise TrackFileError(path, None, "expected a list of track objects")
    return list(enumerate(data, start=1))


def _parse_csv(text: str) -> List[Tuple[int, Any]]:
    rows: List[Tuple[int, Any]] = []
    csv_rows = reader(text.splitlines())
    for fields in csv_rows:
        if not fields or not "".join(fields).strip():
            continue
        if fields[0].lstrip().startswith("#"):
            continue
        if len(fields) != 3:
            rows.append((csv_rows.line_num, fields))
            continue
        artist, title, duration = (f.strip() for f in fields)
        rows.append((csv_rows.line_num, {"artist": artist, "title": title, "duration": duration}))
    return rows


def load_tracks(path: Path, show_progress: bool = False) -> List[Track]:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        entries = _parse_json(path, text)
    elif suffix in (".csv", ".txt"):
        entries = _parse_csv(text)
    else:
        raise TrackFileError(path, None, f"unsupported file type '{path.suffix}'")

    iterable: Iterable[Tuple[int, Any]] = entries
    if show_progress:
        iterable = tqdm(entries, desc="Loading", unit="track", leave=False)

    tracks: List[Track] = []
    # row is the line number for csv and the list position for json
    for row, entry in iterable:
        if not isinstance(entry, dict):
            raise TrackFileError(path, row, "expected artist, title and duration")
        try:
            tracks.append(Track.from_dict(entry))
        except (KeyError, TypeError, ValueError) as e:
            raise TrackFileError(path, row, str(e)) from e
    logger.info(f"Loaded {len(tracks)} tracks from {path}")
    return tracks


def fill_playlist(playlist: BoundedTrackList, tracks: Iterable[Track]) -> int:
    added = 0
    skipped = 0
    for track in tracks:
        if playlist.append(track):
            added += 1
        else:
            skipped += 1
    if skipped:
        logger.warning(
            f"Track list is full (capacity {playlist.capacity}); {skipped} tracks were not added."
        )
    return added
