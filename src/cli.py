"""CLI interface for pageforge."""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pageforge.config import PageforgeConfig, load_config, merge_cli_overrides
from pageforge.content.mutations import MoveDirection, get_collection, parse_path
from pageforge.content.store import LocalContentGateway
from pageforge.errors import ContentError
from pageforge.gateway import PersistenceGateway
from pageforge.icons import resolve_icon
from pageforge.integrations.content_api import HttpContentGateway
from pageforge.notify import NoticeLevel
from pageforge.schema import CMS_SCHEMA, FieldSpec, get_schema
from pageforge.session import EditorSession

app = typer.Typer(
    name="pageforge",
    help="Edit, save, and publish structured marketing-page content.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_NOTICE_STYLES = {
    NoticeLevel.SUCCESS: "green",
    NoticeLevel.INFO: "cyan",
    NoticeLevel.WARNING: "yellow",
    NoticeLevel.ERROR: "red",
}


class ConsoleNotifier:
    """Notifier that prints notices to the terminal."""

    def __init__(self, target: Console | None = None) -> None:
        self.console = target or console

    def notify(self, level: NoticeLevel, message: str) -> None:
        style = _NOTICE_STYLES[NoticeLevel(level)]
        self.console.print(f"[{style}]{message}[/{style}]")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from pageforge import __version__

        console.print(f"pageforge {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a pageforge TOML config file."),
    ] = None,
    api_url: Annotated[
        Optional[str],
        typer.Option("--api-url", help="Content API base URL (uses the HTTP backend)."),
    ] = None,
    store_dir: Annotated[
        Optional[Path],
        typer.Option("--store-dir", help="Directory of the local JSON content store."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """pageforge - schema-driven page content editor."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    config = load_config(config_path)
    ctx.obj = merge_cli_overrides(
        config,
        api_url=api_url,
        store_dir=str(store_dir) if store_dir is not None else None,
    )


# ── Helpers ──────────────────────────────────────────────────────────


def _config(ctx: typer.Context) -> PageforgeConfig:
    if isinstance(ctx.obj, PageforgeConfig):
        return ctx.obj
    return load_config()


def _build_gateway(config: PageforgeConfig) -> PersistenceGateway:
    if config.api.is_configured:
        return HttpContentGateway(config.api)
    return LocalContentGateway(config.store_path, max_revisions=config.storage.max_revisions)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def _open_session(ctx: typer.Context, page: str) -> EditorSession:
    config = _config(ctx)
    try:
        session = EditorSession(
            page,
            _build_gateway(config),
            ConsoleNotifier(),
            config.editor,
        )
    except ContentError as exc:
        _fail(str(exc))
    if not session.load():
        session.close()
        raise typer.Exit(1)
    return session


def _parse_json(raw: str, what: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        _fail(f"{what} is not valid JSON: {exc}")


def _edit(ctx: typer.Context, page: str, apply: Callable[[EditorSession], None]) -> EditorSession:
    """Open a session, apply one edit, and save it."""
    session = _open_session(ctx, page)
    try:
        try:
            apply(session)
        except ContentError as exc:
            _fail(str(exc))
        if session.is_dirty and not session.save():
            raise typer.Exit(1)
        return session
    finally:
        session.close()


def _field_rows(table: Table, fields: list[FieldSpec], depth: int = 0) -> None:
    for field in fields:
        table.add_row("", f"{'  ' * depth}{field.name}", str(field.type), field.label)
        if field.fields:
            _field_rows(table, field.fields, depth + 1)


# ── Inspection commands ──────────────────────────────────────────────


@app.command()
def pages() -> None:
    """List editable pages."""
    table = Table(title="Pages")
    table.add_column("", width=2)
    table.add_column("Key", style="bold")
    table.add_column("Label")
    table.add_column("Sections", justify="right")
    for key, schema in CMS_SCHEMA.items():
        table.add_row(resolve_icon(schema.icon), key, schema.label, str(len(schema.sections)))
    console.print(table)


@app.command()
def schema(page: Annotated[str, typer.Argument(help="Page key.")]) -> None:
    """Show the sections and fields of a page."""
    try:
        spec = get_schema(page)
    except ContentError as exc:
        _fail(str(exc))
    table = Table(title=f"{resolve_icon(spec.icon)} {spec.label}")
    table.add_column("Section", style="bold")
    table.add_column("Field")
    table.add_column("Type", style="cyan")
    table.add_column("Label")
    for section in spec.sections:
        table.add_row(section.id, "", "", section.label)
        _field_rows(table, section.fields, depth=1)
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    section: Annotated[
        Optional[str],
        typer.Option("--section", "-s", help="Only show this section."),
    ] = None,
) -> None:
    """Print the current content of a page as JSON."""
    session = _open_session(ctx, page)
    session.close()
    doc = session.document
    if section is None:
        console.print(f"[bold]{page}[/bold] ({doc.status}, updated {doc.last_updated:%Y-%m-%d %H:%M})")
        console.print_json(data=doc.content)
        return
    data = doc.section(section)
    if data is None:
        _fail(f"No section '{section}' in {page}")
    console.print_json(data=data)


@app.command()
def history(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
) -> None:
    """List saved revisions of a page."""
    session = _open_session(ctx, page)
    session.close()
    revisions = session.history()
    if not revisions:
        console.print("[yellow]No revisions found.[/yellow]")
        return
    table = Table(title=f"{page} revisions")
    table.add_column("ID", style="bold")
    table.add_column("Saved")
    table.add_column("By")
    table.add_column("Status")
    for revision in revisions:
        table.add_row(
            revision.id,
            f"{revision.created_at:%Y-%m-%d %H:%M}",
            revision.created_by or "-",
            str(revision.document.status),
        )
    console.print(table)


# ── Edit commands ────────────────────────────────────────────────────


@app.command("set")
def set_value(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    path: Annotated[str, typer.Argument(help="Dotted key path, e.g. hero.title.")],
    value: Annotated[str, typer.Argument(help="New value.")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Parse VALUE as JSON."),
    ] = False,
) -> None:
    """Set a single value and save."""
    parsed = _parse_json(value, "VALUE") if as_json else value
    _edit(ctx, page, lambda s: s.set_path(parse_path(path), parsed))


@app.command("add-item")
def add_item(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    collection: Annotated[str, typer.Argument(help="Collection path, e.g. team.members.")],
    data: Annotated[str, typer.Option("--data", "-d", help="Item fields as JSON.")] = "{}",
) -> None:
    """Append an item to a collection and save."""
    item = _parse_json(data, "--data")
    if not isinstance(item, dict):
        _fail("--data must be a JSON object")
    segments = parse_path(collection)
    session = _edit(ctx, page, lambda s: s.add_item(segments, item))
    items = get_collection(session.document, segments)
    if items:
        console.print(f"Added item [bold]{items[-1].get('id')}[/bold]")


@app.command("update-item")
def update_item(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    collection: Annotated[str, typer.Argument(help="Collection path.")],
    item_id: Annotated[str, typer.Argument(help="Item id.")],
    data: Annotated[str, typer.Option("--data", "-d", help="Changed fields as JSON.")] = "{}",
) -> None:
    """Merge changes into one collection item and save."""
    changes = _parse_json(data, "--data")
    if not isinstance(changes, dict):
        _fail("--data must be a JSON object")
    _edit(ctx, page, lambda s: s.update_item(parse_path(collection), item_id, changes))


@app.command("remove-item")
def remove_item(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    collection: Annotated[str, typer.Argument(help="Collection path.")],
    item_id: Annotated[str, typer.Argument(help="Item id.")],
) -> None:
    """Remove one collection item and save."""
    _edit(ctx, page, lambda s: s.remove_item(parse_path(collection), item_id))


@app.command("move-item")
def move_item(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    collection: Annotated[str, typer.Argument(help="Collection path.")],
    index: Annotated[int, typer.Argument(help="Zero-based position of the item.")],
    direction: Annotated[MoveDirection, typer.Argument(help="up or down.")],
) -> None:
    """Swap an item with its neighbour and save."""
    _edit(ctx, page, lambda s: s.move_item(parse_path(collection), index, direction))


@app.command()
def reset(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt."),
    ] = False,
) -> None:
    """Replace all content of a page with its defaults and save."""
    label = get_schema(page).label if page in CMS_SCHEMA else page
    if not yes:
        typer.confirm(
            f"Reset all {label} content to defaults? This cannot be undone.",
            abort=True,
        )
    _edit(ctx, page, lambda s: s.reset_to_defaults(confirm=True))


# ── Lifecycle commands ───────────────────────────────────────────────


@app.command()
def publish(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
) -> None:
    """Publish the saved content of a page."""
    session = _open_session(ctx, page)
    try:
        if not session.publish():
            raise typer.Exit(1)
    finally:
        session.close()


@app.command()
def restore(
    ctx: typer.Context,
    page: Annotated[str, typer.Argument(help="Page key.")],
    revision: Annotated[str, typer.Argument(help="Revision id from `pageforge history`.")],
) -> None:
    """Restore a saved revision as the current content."""
    session = _open_session(ctx, page)
    try:
        if not session.restore(revision):
            raise typer.Exit(1)
    finally:
        session.close()


if __name__ == "__main__":
    app()
