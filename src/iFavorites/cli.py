"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from .application.dtos import NavigateAction, PageDirection, SelectAction, UnavailableAction
from .application.services.favorites_controller import FavoritesController
from .appctx import AppContext
from .errors import AssetNotFoundError, FavoritesError, IndexOutOfRangeError, InvalidOperationError
from .utils.logging import configure_logging

app = typer.Typer(help="Bookmark project assets into pages of favorites")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (IndexOutOfRangeError, InvalidOperationError, AssetNotFoundError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except FavoritesError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _context(ctx: typer.Context) -> AppContext:
    return ctx.obj


def _select_page(controller: FavoritesController, page: Optional[int]) -> None:
    # Pages and rows are 1-based on the command line
    if page is not None:
        controller.handle_go_to_page(page - 1)


@app.callback()
@_handle_errors
def main(
    ctx: typer.Context,
    project: Optional[Path] = typer.Option(
        None, "--project", "-p", help="Project root (defaults to the current directory)"
    ),
    settings: Optional[Path] = typer.Option(
        None, "--settings", envvar="IFAVORITES_SETTINGS", help="Settings file to use"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Select the project whose favorites the command works on."""

    context = AppContext.for_project(project or Path.cwd(), settings)
    configure_logging("DEBUG" if verbose else context.settings.get("log_level", "INFO"))
    ctx.obj = context


@app.command("list")
@_handle_errors
def list_favorites(
    ctx: typer.Context,
    page: Optional[int] = typer.Option(None, "--page", help="Only show this page"),
) -> None:
    """Print the favorites of every page (or of one page)."""

    with _context(ctx).create_session(save_on_close=False) as controller:
        pages = [page - 1] if page is not None else range(controller.page_count())
        for index in pages:
            controller.handle_go_to_page(index)
            table = Table(title=controller.page_label())
            table.add_column("#", justify="right")
            table.add_column("Name")
            table.add_column("Kind")
            table.add_column("Path")
            for row, item in enumerate(controller.describe_current_page(), start=1):
                if not item.is_valid:
                    kind = "[red]missing"
                else:
                    kind = "folder" if item.is_folder else "asset"
                table.add_row(str(row), item.display_name, kind, item.ref.path)
            print(table)


@app.command()
@_handle_errors
def add(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(..., help="Files or folders inside the project"),
    page: Optional[int] = typer.Option(None, "--page", help="Page to add to (default: first)"),
) -> None:
    """Bookmark one or more assets."""

    context = _context(ctx)
    resolver = context.create_resolver()
    refs = []
    for path in paths:
        ref = resolver.ref_for(path)
        if not resolver.is_valid(ref):
            raise AssetNotFoundError(f"Asset not found: {path}")
        refs.append(ref)

    with context.create_session() as controller:
        _select_page(controller, page)
        added = controller.handle_drop(refs)
        print(f"[green]Added {added} favorite(s) to {controller.page_label()}")
        skipped = len(refs) - added
        if skipped:
            print(f"[yellow]Skipped {skipped} already bookmarked")


@app.command("rm")
@_handle_errors
def remove(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Row number as shown by 'list'"),
    page: Optional[int] = typer.Option(None, "--page"),
) -> None:
    """Remove a favorite from a page."""

    with _context(ctx).create_session() as controller:
        _select_page(controller, page)
        removed = controller.handle_remove_request(index - 1)
        print(f"[green]Removed {removed}")


@app.command()
@_handle_errors
def move(
    ctx: typer.Context,
    source: int = typer.Argument(..., help="Current row number"),
    target: int = typer.Argument(..., help="New row number"),
    page: Optional[int] = typer.Option(None, "--page"),
) -> None:
    """Move a favorite to another row of the same page."""

    with _context(ctx).create_session() as controller:
        _select_page(controller, page)
        controller.handle_reorder(source - 1, target - 1)
        print(f"[green]Moved row {source} to {target}")


@app.command("new-page")
@_handle_errors
def new_page(ctx: typer.Context) -> None:
    """Append an empty page."""

    with _context(ctx).create_session() as controller:
        controller.handle_go_to_page(controller.page_count() - 1)
        controller.handle_page_nav(PageDirection.NEXT)
        print(f"[green]Created {controller.page_label()}")


@app.command("delete-page")
@_handle_errors
def delete_page(
    ctx: typer.Context,
    page: int = typer.Argument(..., help="Page number to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete a page and its favorites."""

    context = _context(ctx)
    if not yes and context.settings.get("ui.confirm_page_delete", True):
        typer.confirm(f"Delete page {page} and its favorites?", abort=True)

    with context.create_session() as controller:
        _select_page(controller, page)
        controller.handle_delete_page()
        print(f"[green]Deleted page {page}; {controller.page_count()} page(s) left")


@app.command("open")
@_handle_errors
def open_favorite(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Row number as shown by 'list'"),
    page: Optional[int] = typer.Option(None, "--page"),
) -> None:
    """Reveal a favorite folder, or print the path of a favorite asset."""

    context = _context(ctx)
    with context.create_session(save_on_close=False) as controller:
        _select_page(controller, page)
        result = controller.handle_activate(index - 1)

    if isinstance(result, UnavailableAction):
        raise AssetNotFoundError(f"Favorite is no longer available: {result.ref}")
    if isinstance(result, NavigateAction):
        revealer = context.create_revealer()
        if revealer is not None:
            revealer.reveal_folder(result.path)
        typer.echo(result.path)
    elif isinstance(result, SelectAction):
        typer.echo(context.create_resolver().path_of(result.ref))


if __name__ == "__main__":  # pragma: no cover
    app()
