"""CLI entry point for the scene stepper."""

import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .engine import HistoryStore, PositionState, SceneManager
from .errors import ConfigurationError
from .models import Manifest
from .stage import Stage

app = typer.Typer(
    name="scenestep",
    help="Step through a visual-novel style scene in the terminal",
    no_args_is_help=True
)

CONTROLS = (
    "Controls:\n"
    "  Enter / n  - advance to the next line\n"
    "  f          - scroll forward (only onto lines already seen)\n"
    "  b          - scroll back\n"
    "  q          - quit"
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"scenestep version {__version__}")
        raise typer.Exit()


def load_manifest(path: Path) -> Manifest:
    """Load a manifest, exiting with an error message if it is invalid."""
    try:
        return Manifest.from_yaml(path)
    except Exception as e:
        typer.echo(f"❌ Error loading manifest: {e}")
        raise typer.Exit(1)


def render_change(name: str, attribute: str, value: object) -> None:
    """Echo a surface write."""
    if name == "speaker":
        typer.echo(f"\n🗣  {value}")
    elif name == "speech":
        typer.echo(f"   {value}")
    else:
        shown = "(none)" if value is None else value
        typer.echo(f"   🖼  {name}.{attribute} → {shown}")


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Scene Stepper - Linear dialogue scenes with persistent progress."""
    pass


@app.command()
def play(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to scene manifest YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Base directory for history files (defaults to SCENESTEP_DATA_DIR)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Play a scene interactively, saving progress after every line."""
    setup_logging(verbose)
    manifest = load_manifest(manifest_path)

    typer.echo(f"🎬 {manifest.project_name}")
    typer.echo(CONTROLS)

    stage = Stage.for_manifest(manifest, on_change=render_change)
    try:
        manager = SceneManager.from_manifest(manifest, stage, data_dir=data_dir)
        manager.initialize()
    except ConfigurationError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    manager.enable()
    total = len(manager.state)
    try:
        while True:
            command = typer.prompt(
                f"[{manager.current_position + 1}/{total}]",
                default="",
                show_default=False,
            ).strip().lower()

            if command in ("", "n"):
                before = manager.current_position
                stage.trigger.fire()
                if manager.current_position == before:
                    typer.echo("   (end of scene)")
            elif command == "f":
                if not manager.tick(-1.0):
                    typer.echo("   (next line not seen yet)")
            elif command == "b":
                if not manager.tick(1.0):
                    typer.echo("   (already at the first line)")
            elif command == "q":
                break
            else:
                typer.echo(f"⚠️  Unknown command: {command!r}")
    except typer.Abort:
        typer.echo("")
    finally:
        manager.teardown()

    typer.echo(f"👋 Stopped at line {manager.current_position + 1}/{total}")


@app.command()
def status(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to scene manifest YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Base directory for history files (defaults to SCENESTEP_DATA_DIR)"
    ),
) -> None:
    """Show saved progress for a scene."""
    manifest = load_manifest(manifest_path)
    store = HistoryStore.for_manifest(manifest, data_dir)

    typer.echo(f"📁 Project: {manifest.project_name}")
    typer.echo(f"   Lines: {len(manifest.dialogue)}")
    typer.echo(f"   Characters: {len(manifest.characters)}")
    typer.echo(f"   Backgrounds: {len(manifest.backgrounds)}")

    if not store.exists():
        typer.echo(f"   History: none ({store.path})")
        return

    try:
        state = PositionState(len(manifest.dialogue), manifest.start_position)
    except ConfigurationError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    store.load(state)
    seen = sum(state.visited)
    typer.echo(f"   History: {store.path}")
    typer.echo(f"   Position: {state.current_index + 1}/{len(state)}")
    typer.echo(f"   Seen: {seen}/{len(state)}")

    typer.echo("\n📜 Lines:")
    for i, line in enumerate(manifest.dialogue):
        status_icon = "✅" if state.is_visited(i) else "⏳"
        marker = " ◀" if i == state.current_index else ""
        preview = line.line[:60] + "..." if len(line.line) > 60 else line.line
        typer.echo(f"   {status_icon} {i + 1}. {line.speaker}: {preview}{marker}")


@app.command()
def reset(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to scene manifest YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Base directory for history files (defaults to SCENESTEP_DATA_DIR)"
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Do not ask for confirmation"
    ),
) -> None:
    """Forget saved progress for a scene."""
    manifest = load_manifest(manifest_path)
    store = HistoryStore.for_manifest(manifest, data_dir)

    if not store.exists():
        typer.echo(f"✅ No history to remove at {store.path}")
        return

    if not yes:
        typer.confirm(f"Delete {store.path}?", abort=True)

    try:
        store.clear()
    except OSError as e:
        typer.echo(f"❌ Error removing history: {e}")
        raise typer.Exit(1)
    typer.echo(f"🗑  Removed {store.path}")


@app.command()
def validate(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to scene manifest YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Check that a manifest can be played without touching its history."""
    setup_logging(verbose)
    manifest = load_manifest(manifest_path)

    stage = Stage.for_manifest(manifest)
    try:
        manager = SceneManager.from_manifest(manifest, stage, persist=False)
        manager.initialize()
    except ConfigurationError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    in_use = [entity.name for entity in manager.entities if entity.is_in_use()]
    skipped = [entity.name for entity in manager.entities if not entity.is_in_use()]

    typer.echo(f"✅ {manifest.project_name}: {len(manager.state)} lines")
    typer.echo(f"   Active visuals: {', '.join(in_use) if in_use else 'none'}")
    if skipped:
        typer.echo(f"⚠️  Skipped visuals: {', '.join(skipped)}")


if __name__ == "__main__":
    app()
