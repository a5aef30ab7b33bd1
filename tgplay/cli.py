from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import default_config
from .settings import load_settings
from .store import ConfigError, FileStore
from .logging import setup_logging
from .runner import Runner
from .tui.components import render_error
from .tui.items import is_divider_key
from .tui.theme import DEFAULT_THEME

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="tgplay: paged terminal navigator for goto targets, commands and notes",
    rich_markup_mode="rich",
)
console = Console()

SHELL_FUNCTION = """\
# Add to your shell rc file, then run `{name}` instead of `tgplay`.
{name}() {{
    tgplay "$@"
    local cmd_file="{command_file}"
    if [ -f "$cmd_file" ]; then
        . "$cmd_file"
        rm -f "$cmd_file"
    fi
}}
"""


def _store() -> FileStore:
    s = load_settings()
    setup_logging(s)
    return FileStore(s.TGPLAY_HOME)


def _config_error(e: ConfigError) -> typer.Exit:
    logger.error("config error: %s", e)
    render_error(
        console,
        f"Failed to read {e.path.name}",
        e.cause,
        f"Fix or remove {e.path}",
    )
    return typer.Exit(code=1)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]tgplay[/bold]: jump to directories, look up commands, copy notes.

    [dim]Run without arguments to open the navigator.[/dim]

    [bold]Keys:[/bold]
      ← →       switch page
      ↑ ↓       move
      /         search the current page
      enter     select
      q / esc   quit (or leave search)
    """
    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=navigate())


def navigate() -> int:
    s = load_settings()
    setup_logging(s)
    store = FileStore(s.TGPLAY_HOME)
    runner = Runner(store, console, theme=DEFAULT_THEME, capacity=s.TGPLAY_MAX_VISIBLE)
    try:
        return runner.run()
    except ConfigError as e:
        raise _config_error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("status", help="Show file locations, page sizes and frequent targets")
def status(
    top: int = typer.Option(5, "-n", "--top", help="How many frequent targets to list"),
):
    store = _store()
    try:
        config = store.load_config(create=False)
        options = store.load_options()
        frequency = store.load_frequency()
    except ConfigError as e:
        raise _config_error(e)

    config_note = "" if store.config_path.exists() else "  [dim](not created yet)[/dim]"
    console.print(Panel.fit(
        "\n".join([
            f"[bold]Config:[/bold]     {escape(str(store.config_path))}{config_note}",
            f"[bold]Options:[/bold]    {escape(str(store.options_path))}",
            f"[bold]Frequency:[/bold]  {escape(str(store.frequency_path))}",
        ]),
        title="[bold]Files[/bold]",
    ))

    pages = Table(title="[bold]Pages[/bold]")
    pages.add_column("Page", style="bold")
    pages.add_column("Items", style="cyan", justify="right")
    pages.add_column("Dividers", style="dim", justify="right")
    for name, section in config.sections():
        dividers = sum(1 for key in section if is_divider_key(key))
        pages.add_row(name, str(len(section) - dividers), str(dividers))
    console.print(pages)
    console.print(f"[bold]frequent goTo:[/bold] {'enabled' if options.frequent_goto else 'disabled'}")
    console.print()

    keys = frequency.top_keys()[:top]
    if not keys:
        console.print("[dim]No frequency history yet.[/dim]")
        return

    table = Table(title="[bold]Frequent targets[/bold]")
    table.add_column("Target", style="bold")
    table.add_column("Path", style="dim")
    table.add_column("Count", style="cyan", justify="right")
    for key in keys:
        table.add_row(
            escape(key),
            escape(config.goto.get(key) or "(removed)"),
            str(frequency.frequencies[key]),
        )
    console.print(table)


@app.command("init", help="Write the default config.json")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
):
    store = _store()
    if store.config_path.exists() and store.config_path.read_text(encoding="utf-8").strip() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {escape(str(store.config_path))}")
        console.print("[dim]Use --force to overwrite it.[/dim]")
        raise typer.Exit(code=1)

    store.save_config(default_config())
    console.print(f"[bold green]✓ Wrote[/bold green] {escape(str(store.config_path))}")


@app.command("shell-init", help="Print the shell function that applies goTo selections")
def shell_init(
    name: str = typer.Option("tg", "--name", help="Name of the shell function"),
):
    store = _store()
    typer.echo(SHELL_FUNCTION.format(name=name, command_file=store.command_path), nl=False)


def main():
    app()
