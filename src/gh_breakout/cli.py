"""CLI interface for gh-breakout."""

import json
import os
import sys
from dataclasses import replace
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animation_pipeline import encode_animation
from .console_printer import ContributionConsolePrinter
from .game.config import DEFAULT_CONFIG, GameConfig
from .game.render_context import PALETTE_SIZE, RenderContext
from .github_client import ContributionData, GitHubAPIError, fetch_contribution_data
from .output import DEFAULT_OUTPUT_FORMAT, output_path_for_format, supported_output_formats

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats())


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    username: str = typer.Argument(
        None,
        envvar=["INPUT_GITHUB_USERNAME", "GITHUB_USERNAME"],
        help="GitHub username to fetch data for",
        show_default=False,
    ),
    token: str = typer.Option(
        None,
        "--token",
        "-t",
        envvar=["INPUT_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN"],
        help="GitHub token used for the GraphQL API",
        show_default=False,
    ),
    raw_input: str = typer.Option(
        None,
        "--raw-input",
        "--raw-in",
        "-ri",
        help="Load contribution data from JSON file (skips GitHub API call)",
    ),
    raw_output: str = typer.Option(
        None,
        "--raw-output",
        "--raw-out",
        "-ro",
        help="Save contribution data to JSON file",
    ),
    output_dir: str = typer.Option(
        "output",
        "--output-dir",
        "--output-path",
        "-o",
        envvar=["INPUT_OUTPUT_PATH", "OUTPUT_PATH"],
        help="Directory receiving one file per variant (light, dark, custom)",
    ),
    output_format: str = typer.Option(
        DEFAULT_OUTPUT_FORMAT,
        "--format",
        "-f",
        envvar=["INPUT_OUTPUT_FORMAT", "OUTPUT_FORMAT"],
        help=f"Animation format ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    light: bool = typer.Option(False, "--light", help="Generate the light variant"),
    dark: bool = typer.Option(False, "--dark", help="Generate the dark variant"),
    ghost_bricks: bool = typer.Option(
        True,
        "--ghost-bricks/--no-ghost-bricks",
        envvar=["INPUT_ENABLE_GHOST_BRICKS", "ENABLE_GHOST_BRICKS"],
        help="Days without contributions stay on the board as pass-through decoration",
    ),
    paddle_color: str = typer.Option(
        None,
        "--paddle-color",
        envvar=["INPUT_PADDLE_COLOR", "PADDLE_COLOR"],
        help="Paddle color of the custom variant",
    ),
    ball_color: str = typer.Option(
        None,
        "--ball-color",
        envvar=["INPUT_BALL_COLOR", "BALL_COLOR"],
        help="Ball color of the custom variant",
    ),
    bricks_colors: str = typer.Option(
        None,
        "--bricks-colors",
        envvar=["INPUT_BRICKS_COLORS", "BRICKS_COLORS"],
        help=f"{PALETTE_SIZE} comma-separated brick colors of the custom variant",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frames",
        help=f"Maximum number of frames to simulate (default {DEFAULT_CONFIG.max_frames})",
    ),
) -> None:
    """
    Turn a GitHub contribution graph into an animated Breakout game.

    You can either fetch fresh data from GitHub or load from a previously saved file.

    Examples:
      # Fetch from GitHub, write output/light.svg and output/dark.svg
      gh-breakout czl9707 --light --dark

      # Load from saved file, custom colors
      gh-breakout --raw-input data.json --paddle-color "#ff0000"
    """
    try:
        # Load data from file or GitHub
        if raw_input:
            data = _load_data_from_file(raw_input)
        elif username:
            data = _load_data_from_github(username, token)
        else:
            raise CLIError("Username is required (or pass --raw-input)")

        # Display the data
        printer = ContributionConsolePrinter(console)
        printer.display_stats(data)
        printer.display_contribution_graph(data)

        # Save to file if requested
        if raw_output:
            _save_data_to_file(data, raw_output)

        variants = _resolve_variants(light, dark, paddle_color, ball_color, bricks_colors)
        config = _resolve_config(max_frames)
        out_dir = _prepare_output_dir(output_dir)
        for name, context in variants:
            output_path = _output_path(out_dir, name, output_format)
            _generate_output(data, output_path, context, ghost_bricks, config)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _load_data_from_file(file_path: str) -> ContributionData:
    """Load contribution data from a JSON file."""
    console.print(f"[bold blue]Loading data from {file_path}...[/bold blue]")
    try:
        with open(file_path, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CLIError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in '{file_path}': {e}")
    if not isinstance(data, dict) or not isinstance(data.get("weeks"), list):
        raise CLIError(f"'{file_path}' does not contain contribution weeks")
    return data


def _load_data_from_github(username: str, token: str | None) -> ContributionData:
    """Fetch contribution data from GitHub API."""
    if not token:
        raise CLIError(
            "GitHub token not found. "
            "Pass --token or set GITHUB_TOKEN (or GH_TOKEN) in the environment."
        )

    console.print(f"[bold blue]Fetching contribution data for {username}...[/bold blue]")
    try:
        return fetch_contribution_data(username, token)
    except GitHubAPIError as e:
        raise CLIError(f"GitHub API error: {e}")


def _save_data_to_file(data: ContributionData, file_path: str) -> None:
    """Save contribution data to a JSON file."""
    try:
        with open(file_path, "w") as f:
            json.dump(data, f, indent=2)
        console.print(f"\n[green]✓[/green] Data saved to {file_path}")
    except IOError as e:
        raise CLIError(f"Failed to save file '{file_path}': {e}")


def _resolve_variants(
    light: bool,
    dark: bool,
    paddle_color: str | None,
    ball_color: str | None,
    bricks_colors: str | None,
) -> list[tuple[str, RenderContext]]:
    """Pick the themes to render; light by default, plus dark on GitHub Actions."""
    variants: list[tuple[str, RenderContext]] = []
    if paddle_color or ball_color or bricks_colors:
        variants.append(
            (
                "custom",
                RenderContext.custom(
                    brick_colors=_parse_bricks_colors(bricks_colors),
                    paddle_color=paddle_color,
                    ball_color=ball_color,
                ),
            )
        )
    elif not light and not dark:
        light = True
        dark = os.getenv("GITHUB_ACTIONS") == "true"

    if light:
        variants.append(("light", RenderContext.lightmode()))
    if dark:
        variants.append(("dark", RenderContext.darkmode()))
    return variants


def _parse_bricks_colors(bricks_colors: str | None) -> list[str] | None:
    if not bricks_colors:
        return None
    colors = [color.strip() for color in bricks_colors.split(",")]
    if len(colors) != PALETTE_SIZE or not all(colors):
        raise CLIError(
            f"--bricks-colors needs exactly {PALETTE_SIZE} comma-separated colors "
            f"(got '{bricks_colors}')"
        )
    return colors


def _resolve_config(max_frames: int | None) -> GameConfig:
    if max_frames is None:
        return DEFAULT_CONFIG
    try:
        return replace(DEFAULT_CONFIG, max_frames=max_frames)
    except ValueError as e:
        raise CLIError(str(e))


def _prepare_output_dir(output_dir: str) -> Path:
    out_dir = Path(output_dir)
    if not out_dir.is_absolute():
        out_dir = Path.cwd() / out_dir
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CLIError(f"Cannot create output directory '{out_dir}': {e}")
    return out_dir


def _output_path(out_dir: Path, name: str, output_format: str) -> str:
    try:
        return output_path_for_format(output_format, str(out_dir / name))
    except ValueError as e:
        raise CLIError(str(e))


def _generate_output(
    data: ContributionData,
    output_path: str,
    context: RenderContext,
    ghost_bricks: bool,
    config: GameConfig,
) -> None:
    """Simulate the game and write the animation to output_path."""
    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} animation...[/bold blue]")

    try:
        encoded = encode_animation(
            data,
            output_path,
            context=context,
            ghost_bricks=ghost_bricks,
            config=config,
        )
    except Exception as e:
        raise CLIError(f"Failed to generate output: {e}")

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        with open(output_path, "wb") as f:
            f.write(encoded)
    except IOError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
