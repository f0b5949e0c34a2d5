from .config import Config
from .models import Track, format_duration
from .playlist import BoundedTrackList
from .loader import TrackFileError, load_tracks, fill_playlist


__all__ = [
    "Config",
    "Track",
    "format_duration",
    "BoundedTrackList",
    "TrackFileError",
    "load_tracks",
    "fill_playlist",
]
