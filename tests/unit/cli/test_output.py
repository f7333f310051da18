"""Tests for output styling and stream routing."""

import pytest

from snowplow.cli.output import OutputStyle, format_duration, resolve_output_style
from snowplow.core.user_feedback import InteractiveFeedback


@pytest.mark.parametrize(
    ("choice", "expected"),
    [
        ("always", OutputStyle(stdout=True, stderr=True)),
        ("never", OutputStyle(stdout=False, stderr=False)),
    ],
)
def test_explicit_style_choices(choice: str, expected: OutputStyle) -> None:
    assert resolve_output_style(choice) == expected


def test_auto_style_is_off_when_streams_are_captured(capsys: pytest.CaptureFixture[str]) -> None:
    assert resolve_output_style("auto") == OutputStyle(stdout=False, stderr=False)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0.4, "0s"), (42, "42s"), (60, "1m 0s"), (83.2, "1m 23s")],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_feedback_routes_streams_without_styling(capsys: pytest.CaptureFixture[str]) -> None:
    feedback = InteractiveFeedback(OutputStyle(stdout=False, stderr=False))

    feedback.info('updating flake `a` at "/a" 1/2')
    feedback.warning("flake `a` is already enabled")
    feedback.error("flake `b` is not tracked")

    captured = capsys.readouterr()
    assert captured.out == 'updating flake `a` at "/a" 1/2\n'
    assert captured.err.splitlines() == [
        "snow-plow: warning: flake `a` is already enabled",
        "snow-plow: error: flake `b` is not tracked",
    ]


def test_feedback_styles_level_when_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    feedback = InteractiveFeedback(OutputStyle(stdout=False, stderr=True))

    feedback.error("boom")

    err = capsys.readouterr().err
    assert "\x1b[" in err
    assert err.startswith("snow-plow: ")
    assert err.rstrip().endswith(": boom")
