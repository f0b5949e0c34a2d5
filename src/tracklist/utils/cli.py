from __future__ import annotations
from argparse import ArgumentTypeError
from pathlib import Path

SUPPORTED_SUFFIXES = (".json", ".csv", ".txt")


def positive_int(value: str) -> int:
    try:
        iv = int(value)
        if iv <= 0:
            raise ArgumentTypeError("capacity must be a positive integer")
        return iv
    except ValueError:
        raise ArgumentTypeError("capacity must be a positive integer")


def looks_like_track_file(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_SUFFIXES
