from __future__ import annotations
from dataclasses import FrozenInstanceError
import pytest

from tracklist.models import Track, format_duration


def test_format_duration():
    assert format_duration(0) == "0:00"
    assert format_duration(65) == "1:05"
    assert format_duration(600) == "10:00"


def test_track_str():
    t = Track(title="Yesterday", artist="The Beatles", duration=125)
    assert str(t) == "The Beatles, Yesterday, 2:05"


def test_track_is_immutable():
    t = Track(title="a", artist="b", duration=1)
    with pytest.raises(FrozenInstanceError):
        t.title = "c"


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Track(title="a", artist="b", duration=-1)


def test_is_shorter_than():
    short = Track(title="a", artist="", duration=10)
    long = Track(title="b", artist="", duration=20)
    assert short.is_shorter_than(long)
    assert not long.is_shorter_than(short)
    assert not short.is_shorter_than(short)


def test_from_dict():
    t = Track.from_dict({"title": "Hey Jude", "artist": "The Beatles", "duration": "431"})
    assert t == Track(title="Hey Jude", artist="The Beatles", duration=431)


@pytest.mark.parametrize("duration", [2.5, False])
def test_from_dict_rejects_non_integral_duration(duration):
    with pytest.raises(ValueError):
        Track.from_dict({"title": "a", "artist": "b", "duration": duration})
