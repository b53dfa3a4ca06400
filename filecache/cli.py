"""CLI interface for managing file cache stores."""

import json
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from filecache.consts import DEFAULT_CACHE_PATH
from filecache.exceptions import FileCacheError
from filecache.storage.cache.file_caching import FileCache
from filecache.storage.registry import find_store, list_instances

app = typer.Typer(
    name="filecache",
    help="Manage file cache stores - clear, expire, export, backup and restore",
)

console = Console()

_state: dict[str, str] = {"path": DEFAULT_CACHE_PATH}


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def _open_store(store: str) -> FileCache:
    """Open an existing store; exit if there is none by that name."""
    try:
        cache = find_store(store, _state["path"])
    except FileCacheError as e:
        _fail(str(e))
    if cache is None:
        _fail(f"No cache store named '{store}'.")
    return cache


def _stores_to_process(store: str | None, all_stores: bool) -> list[FileCache]:
    if all_stores:
        try:
            return list_instances(_state["path"])
        except FileCacheError as e:
            _fail(str(e))
    if not store:
        _fail("Must specify STORE or --all")
    return [_open_store(store)]


@app.callback()
def main(
    path: str = typer.Option(
        DEFAULT_CACHE_PATH,
        "--path",
        "-p",
        envvar="FILECACHE_PATH",
        help="Base path of the stores; relative is relative to the document root",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
) -> None:
    """Manage file cache stores."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    _state["path"] = path


@app.command("list")
def list_stores() -> None:
    """List all cache stores."""
    try:
        stores = list_instances(_state["path"])
    except FileCacheError as e:
        _fail(str(e))

    if not stores:
        console.print("[yellow]No cache stores found.[/yellow]")
        return

    table = Table(title="Cache Stores")
    table.add_column("Store", style="cyan")
    table.add_column("TTL Default", justify="right", style="magenta")
    table.add_column("TTL Ignore", justify="center")
    table.add_column("File Mode")
    table.add_column("Empty", justify="center")

    for store in stores:
        table.add_row(
            store.name,
            f"{store.ttl_default}s" if store.ttl_default else "forever",
            "yes" if store.ttl_ignore else "no",
            store.file_mode.value,
            "yes" if store.is_empty() else "no",
        )

    console.print(table)


@app.command()
def delete(
    store: str = typer.Argument(..., help="Cache store name"),
    key: str = typer.Argument(..., help="Cache item key"),
) -> None:
    """Delete a cache item."""
    cache = _open_store(store)
    try:
        cache.delete(key)
    except FileCacheError as e:
        _fail(str(e))
    console.print(f"[green]Deleted {key} from {store}[/green]")


@app.command("clear-expired")
def clear_expired(
    store: str = typer.Argument(None, help="Cache store name; optional with --all"),
    all_stores: bool = typer.Option(False, "--all", "-a", help="All cache stores"),
) -> None:
    """Delete all expired cache items of one or all cache stores."""
    for cache in _stores_to_process(store, all_stores):
        try:
            count = cache.clear_expired()
        except FileCacheError as e:
            _fail(str(e))
        console.print(f"Cleared {count} expired items from [cyan]{cache.name}[/cyan]")


@app.command()
def clear(
    store: str = typer.Argument(None, help="Cache store name; optional with --all"),
    all_stores: bool = typer.Option(False, "--all", "-a", help="All cache stores"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete all cache items of one or all cache stores."""
    caches = _stores_to_process(store, all_stores)
    names = ", ".join(cache.name for cache in caches)
    if not yes and not typer.confirm(f"Delete all items of {names}?"):
        return

    for cache in caches:
        try:
            count = cache.clear()
        except FileCacheError as e:
            _fail(str(e))
        console.print(f"Cleared {count} items from [cyan]{cache.name}[/cyan]")


@app.command()
def export(
    store: str = typer.Argument(..., help="Cache store name"),
    output: str = typer.Option(None, "--output", "-o", help="Output file path; stdout if omitted"),
) -> None:
    """Export all non-expired cache items of a store as JSON."""
    cache = _open_store(store)
    try:
        items = cache.export()
    except FileCacheError as e:
        _fail(str(e))

    content = json.dumps(items, indent=2, default=str)
    if output is None:
        typer.echo(content)
        return

    Path(output).write_text(content, encoding="utf-8")
    console.print(f"[green]Exported {len(items)} items to {output}[/green]")


@app.command()
def backup(
    store: str = typer.Argument(..., help="Cache store name"),
    name: str = typer.Argument(None, help="Backup name; defaults to a timestamp"),
) -> None:
    """Back up all items of a store."""
    cache = _open_store(store)
    try:
        count = cache.backup(name)
    except FileCacheError as e:
        _fail(str(e))
    console.print(f"[green]Backed up {count} items of {store}[/green]")


@app.command()
def restore(
    store: str = typer.Argument(..., help="Cache store name"),
    name: str = typer.Argument(..., help="Backup name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Replace a store's items with a backup."""
    cache = _open_store(store)
    if not yes and not typer.confirm(f"Replace all items of {store} with backup {name}?"):
        return
    try:
        cache.restore(name)
    except FileCacheError as e:
        _fail(str(e))
    console.print(f"[green]Restored {store} from backup {name}[/green]")


@app.command()
def promote(
    store: str = typer.Argument(..., help="Cache store name"),
    name: str = typer.Argument(None, help="Name of the backup of the replaced items"),
) -> None:
    """Replace a store's items with its candidate, backing up the current ones."""
    cache = _open_store(store)
    try:
        promoted = cache.promote_candidate(name)
    except FileCacheError as e:
        _fail(str(e))
    if not promoted:
        console.print(f"[yellow]Store {store} has no candidate.[/yellow]")
        return
    console.print(f"[green]Promoted candidate of {store}[/green]")


@app.command()
def destroy(
    store: str = typer.Argument(..., help="Cache store name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete a store entirely; items, settings and directory."""
    cache = _open_store(store)
    if not yes and not typer.confirm(f"Destroy store {store}?"):
        return
    try:
        cache.destroy()
    except FileCacheError as e:
        _fail(str(e))
    console.print(f"[green]Destroyed {store}[/green]")


if __name__ == "__main__":
    app()
