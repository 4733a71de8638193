"""CLI entry point for treespace."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from treespace.config import TreespaceConfig, load_config
from treespace.config.loader import DEFAULT_CONFIG_TEMPLATE
from treespace.logs import configure_logging
from treespace.namespace import DirectoryCreator, NamespaceContext, PathResolver
from treespace.render import build_tree, render_plain
from treespace.shell import Shell

app = typer.Typer(
    name="treespace",
    help="In-memory namespace tree: resolve paths and create directories.",
)

config_app = typer.Typer(help="Manage treespace configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: TreespaceConfig | None = None


def _get_config() -> TreespaceConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to treespace.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _new_context(cfg: TreespaceConfig) -> NamespaceContext:
    return NamespaceContext(cfg.limits)


def _enter(ctx: NamespaceContext, cd: str | None) -> None:
    """Move the current directory to *cd*, which must already exist."""
    if cd is None:
        return
    target = PathResolver(ctx).lookup(cd)
    if target is None:
        rprint(f"[red]Error:[/red] no such directory {escape(cd)}")
        raise typer.Exit(1)
    ctx.chdir(target)


def _show_tree(ctx: NamespaceContext, cfg: TreespaceConfig) -> None:
    if cfg.output.color:
        rprint(build_tree(ctx))
    else:
        typer.echo(render_plain(ctx))


@app.command()
def mkdir(
    paths: list[str] = typer.Argument(..., help="Directories to create, in order"),
    cd: str | None = typer.Option(
        None, "--cd", help="Current directory for relative paths (created by earlier paths)"
    ),
    tree: bool | None = typer.Option(
        None, "--tree/--no-tree", help="Print the namespace afterwards"
    ),
) -> None:
    """Create directories in a fresh namespace."""
    cfg = _get_config()
    ctx = _new_context(cfg)
    creator = DirectoryCreator(ctx)
    failed = 0
    pending_cd = cd

    for path in paths:
        # Relative paths start resolving from --cd as soon as it exists
        if pending_cd is not None:
            target = PathResolver(ctx).lookup(pending_cd)
            if target is not None:
                ctx.chdir(target)
                pending_cd = None
        result = creator.create(path)
        if result.ok:
            rprint(f"[green]{escape(result.message)}[/green]")
        else:
            failed += 1
            rprint(f"[red]{escape(result.message)}[/red]")

    if pending_cd is not None:
        rprint(f"[yellow]Warning:[/yellow] --cd {escape(pending_cd)} was never created")

    show = tree if tree is not None else cfg.output.show_tree
    if show:
        _show_tree(ctx, cfg)
    if failed:
        raise typer.Exit(1)


@app.command()
def split(
    path: str = typer.Argument(..., help="Path to split and resolve"),
    setup: list[str] = typer.Option(
        [], "--setup", "-s", help="Directory to create before resolving (repeatable)"
    ),
    cd: str | None = typer.Option(None, "--cd", help="Current directory for relative paths"),
) -> None:
    """Show how a path splits into directory prefix and final component."""
    cfg = _get_config()
    ctx = _new_context(cfg)
    creator = DirectoryCreator(ctx)
    for d in setup:
        result = creator.create(d)
        if not result.ok:
            rprint(f"[red]Setup failed:[/red] {escape(result.message)}")
            raise typer.Exit(1)
    _enter(ctx, cd)

    resolution = PathResolver(ctx).resolve(path)
    if resolution.error is not None:
        rprint(f"[red]{escape(resolution.error.message)}[/red]")
        raise typer.Exit(1)

    table = Table(title=escape(f"split {path!r}"))
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("directory prefix", escape(repr(resolution.dir_name)))
    table.add_row("final component", escape(repr(resolution.base_name)))
    table.add_row("parent", escape(ctx.path_of(resolution.parent)))
    rprint(table)


@app.command()
def shell() -> None:
    """Interactive shell over a fresh namespace (reads commands until EOF)."""
    cfg = _get_config()
    console = Console(no_color=not cfg.output.color)
    Shell(_new_context(cfg), console).run()


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default treespace.yaml in current directory."""
    target = Path("treespace.yaml")
    if target.exists() and not force:
        rprint("[yellow]treespace.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
