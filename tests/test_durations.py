import pytest

from veospark.core.durations import parse_duration, target_narration_words, target_shot_count


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10s", 10.0),
        ("10", 10.0),
        ("2m", 120.0),
        ("1.5 min", 90.0),
        ("30 sec", 30.0),
        ("500ms", 500.0),
        ("5,5s", 55.0),
        ("-5s", 5.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("1.2.3s", 1.2),
        ("1.5 min.", 90.0),
        ("10.s", 10.0),
        ("m", 0.0),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "10s", "1m", "??", "-3", "..", "1e5"])
def test_parse_duration_never_negative(text):
    assert parse_duration(text) >= 0


def test_target_shot_count():
    assert target_shot_count(10, 5) == 2
    assert target_shot_count(60, 4) == 15
    assert target_shot_count(11, 5) == 2
    # Known but shorter than one cut: still one shot
    assert target_shot_count(3, 5) == 1
    assert target_shot_count(0, 5) is None
    assert target_shot_count(10, 0) is None


def test_target_narration_words():
    assert target_narration_words(10, fallback=40) == 25
    assert target_narration_words(60, fallback=40) == 150
    assert target_narration_words(0, fallback=40) == 40
