"""Tests for the CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gh_breakout.cli import app

runner = CliRunner()

# Keep CI variables from leaking into the option defaults
CLEAN_ENV = {
    "GITHUB_ACTIONS": None,
    "INPUT_GITHUB_USERNAME": None,
    "GITHUB_USERNAME": None,
    "INPUT_GITHUB_TOKEN": None,
    "GITHUB_TOKEN": None,
    "GH_TOKEN": None,
    "INPUT_OUTPUT_PATH": None,
    "OUTPUT_PATH": None,
    "INPUT_OUTPUT_FORMAT": None,
    "OUTPUT_FORMAT": None,
    "INPUT_PADDLE_COLOR": None,
    "PADDLE_COLOR": None,
    "INPUT_BALL_COLOR": None,
    "BALL_COLOR": None,
    "INPUT_BRICKS_COLORS": None,
    "BRICKS_COLORS": None,
    "INPUT_ENABLE_GHOST_BRICKS": None,
    "ENABLE_GHOST_BRICKS": None,
}

SAMPLE_DATA = {
    "username": "testuser",
    "total_contributions": 6,
    "weeks": [
        {
            "days": [
                {"color": "#9be9a8", "count": 1, "date": "2024-01-01"},
                {"color": "#ebedf0", "count": 0, "date": "2024-01-02"},
                {"color": "#216e39", "count": 5, "date": "2024-01-03"},
                None,
                None,
                None,
                None,
            ]
        }
    ],
}


@pytest.fixture
def raw_input(tmp_path: Path) -> str:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SAMPLE_DATA))
    return str(path)


def _flat(output: str) -> str:
    """Undo rich line wrapping."""
    return " ".join(output.split())


def _invoke(*args: str, env: dict | None = None):
    return runner.invoke(app, list(args), env={**CLEAN_ENV, **(env or {})})


def test_generates_light_variant_by_default(raw_input: str, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    result = _invoke("--raw-input", raw_input, "--output-dir", str(out_dir), "--max-frames", "300")

    assert result.exit_code == 0, result.output
    assert (out_dir / "light.svg").read_text().startswith("<svg")
    assert not (out_dir / "dark.svg").exists()


def test_github_actions_adds_dark_variant(raw_input: str, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    result = _invoke(
        "--raw-input", raw_input, "--output-dir", str(out_dir), "--max-frames", "300",
        env={"GITHUB_ACTIONS": "true"},
    )

    assert result.exit_code == 0, result.output
    assert (out_dir / "light.svg").exists()
    assert "#151B23" in (out_dir / "dark.svg").read_text()


def test_custom_colors_produce_custom_variant(raw_input: str, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    result = _invoke(
        "--raw-input", raw_input, "--output-dir", str(out_dir), "--max-frames", "300",
        "--paddle-color", "#ff0000",
        "--bricks-colors", "#000000,#111111,#222222,#333333,#444444",
    )

    assert result.exit_code == 0, result.output
    markup = (out_dir / "custom.svg").read_text()
    assert 'fill="#ff0000"' in markup
    assert ".c4{fill:#444444}" in markup
    assert not (out_dir / "light.svg").exists()


def test_gif_format(raw_input: str, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    result = _invoke(
        "--raw-input", raw_input, "--output-dir", str(out_dir), "--max-frames", "5",
        "--format", "gif", "--no-ghost-bricks",
    )

    assert result.exit_code == 0, result.output
    assert (out_dir / "light.gif").read_bytes().startswith(b"GIF89")


def test_raw_output_saves_data(raw_input: str, tmp_path: Path) -> None:
    saved = tmp_path / "saved.json"

    result = _invoke(
        "--raw-input", raw_input, "--raw-output", str(saved),
        "--output-dir", str(tmp_path / "out"), "--max-frames", "5",
    )

    assert result.exit_code == 0, result.output
    assert json.loads(saved.read_text()) == SAMPLE_DATA


def test_username_is_required() -> None:
    result = _invoke()

    assert result.exit_code == 1
    assert "Username is required" in _flat(result.output)


def test_token_is_required_for_github() -> None:
    result = _invoke("testuser")

    assert result.exit_code == 1
    assert "GitHub token not found" in _flat(result.output)


def test_missing_raw_input_file(tmp_path: Path) -> None:
    result = _invoke("--raw-input", str(tmp_path / "missing.json"))

    assert result.exit_code == 1
    assert "not found" in _flat(result.output)


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (("--bricks-colors", "#000,#111"), "exactly 5 comma-separated colors"),
        (("--max-frames", "0"), "max_frames must be positive"),
        (("--format", "png"), "Invalid format"),
    ],
)
def test_invalid_options(raw_input: str, tmp_path: Path, args: tuple[str, ...], message: str) -> None:
    result = _invoke("--raw-input", raw_input, "--output-dir", str(tmp_path / "out"), *args)

    assert result.exit_code == 1
    assert message in _flat(result.output)
