from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping


def format_duration(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def _whole_seconds(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"duration must be a number of seconds, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"duration must be whole seconds, got {value!r}")
    return int(value)


@dataclass(frozen=True, slots=True)
class Track:
    title: str
    artist: str
    duration: int  # seconds

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")

    def is_shorter_than(self, other: Track) -> bool:
        return self.duration < other.duration

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Track:
        return cls(
            title=str(data["title"]),
            artist=str(data.get("artist", "")),
            duration=_whole_seconds(data["duration"]),
        )

    def __str__(self) -> str:
        return f"{self.artist}, {self.title}, {format_duration(self.duration)}"
