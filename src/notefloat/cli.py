"""CLI entry point: open the note TUI, plus list/show/add, summaries, and git sync."""

from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from notefloat import __version__
from notefloat.config import (
    CONFIG_PATH,
    init_config_if_missing,
    load_config,
    validate_config,
)
from notefloat.logging_setup import setup_logging
from notefloat.notes import NoteStore, category_title

console = Console(highlight=False)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _load_valid_config() -> dict:
    cfg = load_config()
    try:
        validate_config(cfg)
    except ValueError as exc:
        console.print(f"  [red bold]Config error:[/red bold] {exc}")
        console.print(f"  [dim]Fix it in {CONFIG_PATH}[/dim]")
        sys.exit(1)
    return cfg


def _resolve_category(category: str | None, cfg: dict) -> str:
    """Lower-case *category* and check it is configured; default when omitted."""
    if not category:
        return cfg.get("default_category", "quick")
    category = category.lower()
    if category not in cfg["categories"]:
        console.print(f"  [red bold]Error:[/red bold] Invalid note category: {category}")
        console.print(f"  [dim]Categories: {', '.join(cfg['categories'])}[/dim]")
        sys.exit(1)
    return category


def _store(cfg: dict) -> NoteStore:
    return NoteStore(cfg["storage_path"])


def _run_tui(category: str | None) -> None:
    from notefloat.app import NoteFloatApp
    from notefloat.session import NoteSession

    cfg = _load_valid_config()
    category = _resolve_category(category, cfg)
    session = NoteSession.from_config(cfg)
    NoteFloatApp(session=session, cfg=cfg, category=category).run()
    if session.buffer(category) is not None:
        console.print(f"  [green]Saved[/green]  [dim]{session.store.path_for(category)}[/dim]")


# ---------------------------------------------------------------------------
# Main command group
# ---------------------------------------------------------------------------

@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(__version__, prog_name="notefloat")
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """NoteFloat: markdown scratch notes with autosave and git sync."""
    setup_logging(debug=debug)
    if ctx.invoked_subcommand is None:
        _run_tui(None)


@main.command(name="open")
@click.argument("category", required=False)
def open_cmd(category: str | None) -> None:
    """Open a note category in the editor (default category if omitted)."""
    _run_tui(category)


@main.command(name="list")
def list_cmd() -> None:
    """List note categories and their files."""
    cfg = _load_valid_config()
    store = _store(cfg)
    console.print(f"  [dim]Notes folder: {store.storage_path}[/dim]\n")
    for category in cfg["categories"]:
        path = store.path_for(category)
        marker = " [dim](default)[/dim]" if category == cfg.get("default_category") else ""
        if path.is_file():
            mtime = datetime.fromtimestamp(path.stat().st_mtime).strftime("%d-%m-%Y %H:%M")
            lines = len(store.load(category).split("\n"))
            console.print(f"    [bold]{category_title(category):<10}[/bold] {lines:>4} lines  [dim]{mtime}[/dim]{marker}")
        else:
            console.print(f"    [bold]{category_title(category):<10}[/bold] [dim]empty[/dim]{marker}")


@main.command()
@click.argument("category", required=False)
def show(category: str | None) -> None:
    """Print a note."""
    cfg = _load_valid_config()
    category = _resolve_category(category, cfg)
    click.echo(_store(cfg).load(category))


@main.command()
@click.argument("category")
@click.argument("text", nargs=-1, required=True)
def add(category: str, text: tuple[str, ...]) -> None:
    """Append a line of TEXT to a note and save it."""
    cfg = _load_valid_config()
    category = _resolve_category(category, cfg)
    store = _store(cfg)
    content = store.load(category)
    line = " ".join(text)
    # Reuse a trailing empty line rather than growing a gap at the end.
    if content.endswith("\n"):
        content = content + line
    else:
        content = f"{content}\n{line}"
    path = store.save(category, content)
    console.print(f"  [green]Added[/green]  to [bold]{category_title(category)}[/bold] [dim]{path}[/dim]")


@main.command()
@click.argument("category", required=False)
@click.option("--save", "save_file", is_flag=True, default=False, help="Also save the summary as Markdown.")
@click.option("--copy", "copy", is_flag=True, default=False, help="Copy the summary to the clipboard.")
def summarize(category: str | None, save_file: bool, copy: bool) -> None:
    """Summarize a note with the OpenAI CLI, or show basic counts."""
    from notefloat.output import copy_to_clipboard, save_summary
    from notefloat.summarizer import openai_available
    from notefloat.summarizer import summarize as summarize_note

    cfg = _load_valid_config()
    category = _resolve_category(category, cfg)
    text = _store(cfg).load(category)

    if openai_available():
        with console.status("  Generating summary..."):
            summary = summarize_note(category, text, cfg)
    else:
        summary = summarize_note(category, text, cfg)

    style = "red" if not summary.ok else ""
    for line in summary.lines:
        console.print(line, style=style, markup=False)

    if not summary.ok:
        sys.exit(1)
    if save_file:
        path = save_summary(summary, cfg["storage_path"])
        console.print(f"\n  [green]Saved[/green]      [dim]{path}[/dim]")
    if copy or cfg.get("auto_clipboard", False):
        if copy_to_clipboard(summary.text):
            console.print("  [green]Clipboard[/green]  copied")
        else:
            console.print("  [yellow]Clipboard unavailable.[/yellow]")


# ---------------------------------------------------------------------------
# git subcommands
# ---------------------------------------------------------------------------

@main.command(name="git-init")
@click.option("--remote", type=str, default=None, help="Remote URL to add as origin.")
def git_init(remote: str | None) -> None:
    """Initialise a git repository in the notes folder."""
    from notefloat import git_sync

    cfg = _load_valid_config()
    path = Path(cfg["storage_path"]).expanduser()
    already = git_sync.is_git_repo(path)

    ok, msg = git_sync.init_repo(path)
    if not ok:
        console.print(f"  [red bold]Error:[/red bold] {msg}")
        sys.exit(1)
    console.print(f"  [green]{msg}[/green]")
    if already:
        return

    if remote is None:
        remote = click.prompt(
            "  Enter git remote URL (optional)",
            default="",
            show_default=False,
        ).strip()
    if remote:
        ok, msg = git_sync.add_remote(path, remote)
        if not ok:
            console.print(f"  [red bold]Error:[/red bold] {msg}")
            sys.exit(1)
        console.print(f"  [green]{msg}[/green]")


@main.command(name="git-sync")
def git_sync_cmd() -> None:
    """Commit and push the notes folder now."""
    from notefloat import git_sync

    cfg = _load_valid_config()
    with console.status("  Syncing notes..."):
        ok, msg = git_sync.sync(Path(cfg["storage_path"]).expanduser(), cfg["git_sync_message"])
    if not ok:
        console.print(f"  [red bold]Error:[/red bold] {msg}")
        sys.exit(1)
    console.print(f"  [green]{msg}[/green]")


@main.command()
def watch() -> None:
    """Run git sync on the configured interval until interrupted."""
    from notefloat.session import NoteSession
    from notefloat.snapshot import SyncScheduler

    cfg = _load_valid_config()
    scheduler = SyncScheduler(NoteSession.from_config(cfg), cfg)
    if not scheduler.start_git_sync():
        console.print("  [red bold]Error:[/red bold] Git not found in PATH. Git sync disabled.")
        sys.exit(1)
    minutes = cfg["git_sync_interval"] / 60000
    console.print(f"  Syncing [dim]{scheduler.storage_path}[/dim] every {minutes:g} min. Ctrl+C to stop.")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        console.print("  Stopped.")
    finally:
        scheduler.stop()


# ---------------------------------------------------------------------------
# setup / config subcommands
# ---------------------------------------------------------------------------

@main.command()
def setup() -> None:
    """Create the config file and check git, the OpenAI CLI, and the notes folder."""
    from notefloat.platform_setup import run_all_checks

    created = init_config_if_missing()
    if created:
        console.print(f"  Created default config at [dim]{CONFIG_PATH}[/dim]")
    else:
        console.print(f"  Config already exists at [dim]{CONFIG_PATH}[/dim]")

    console.print()
    cfg = load_config()
    all_ok = True
    for name, ok, msg in run_all_checks(cfg["storage_path"]):
        icon = "[green]OK[/green]" if ok else "[red]MISSING[/red]"
        console.print(f"  [{icon}] {name}: {msg}")
        if not ok:
            all_ok = False

    console.print()
    if all_ok:
        console.print("  [green]All checks passed.[/green]")
    else:
        console.print("  [yellow]Some checks failed.[/yellow] See above for install instructions.")


@main.command()
@click.option("--show", is_flag=True, help="Show current config values.")
def config(show: bool) -> None:
    """Show or edit configuration."""
    if show:
        cfg = load_config()
        for key, val in cfg.items():
            console.print(f"  [bold]{key}:[/bold] {escape(repr(val))}")
    else:
        console.print(f"  Config file: [dim]{CONFIG_PATH}[/dim]")
        console.print("  Edit it directly, or use [bold]'notefloat config --show'[/bold] to view current values.")
