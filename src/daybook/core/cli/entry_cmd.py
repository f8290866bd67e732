"""Entry commands: new, list, show, edit, delete, tag, untag, tags, move, share."""

from __future__ import annotations

import click

from .common import get_console, resolve, run_with_store


def _date_option(value: str | None):
    from daybook.journal.filters import parse_date

    try:
        return parse_date(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date") from None


@click.command()
@click.argument("title")
@click.option("--content", "-c", default="", help="Entry body text.")
@click.option("--folder", "-f", "folder_ref", default=None, help="Folder id to file the entry under.")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag to attach (repeatable).")
@click.pass_context
def new(ctx: click.Context, title: str, content: str, folder_ref: str | None, tags: tuple[str, ...]) -> None:
    """Create a new entry."""
    from dataclasses import replace

    from daybook.journal import Entry

    async def action(store):
        folder_id = resolve(store.folders, folder_ref, "folder").id if folder_ref else None
        entry = replace(Entry.new(title=title or "Untitled", content=content, folder_id=folder_id), tags=list(tags))
        await store.save_entry(entry)
        return store.get_entry(entry.id)

    entry = run_with_store(ctx, action)
    mood = f" (sentiment {entry.sentiment:+.2f})" if entry.sentiment is not None else ""
    click.echo(f"Created entry {entry.id}{mood}")


@click.command(name="list")
@click.option("--folder", "-f", "folder_ref", default=None, help="Show entries in this folder (default: root).")
@click.option("--all", "all_folders", is_flag=True, help="Show entries from every folder.")
@click.option("--search", "-s", default="", help="Case-insensitive text search in title and content.")
@click.option("--since", default=None, help="Only entries created on or after this date (YYYY-MM-DD).")
@click.option("--until", default=None, help="Only entries created on or before this date (YYYY-MM-DD).")
@click.option("--tag", "-t", default=None, help="Only entries carrying this tag.")
@click.pass_context
def list_entries(
    ctx: click.Context,
    folder_ref: str | None,
    all_folders: bool,
    search: str,
    since: str | None,
    until: str | None,
    tag: str | None,
) -> None:
    """List entries, newest first."""
    from rich.markup import escape
    from rich.style import Style
    from rich.table import Table
    from rich.text import Text

    from daybook.journal import EntryFilter, sentiment_color
    from daybook.journal.models import normalize_tag

    start, end = _date_option(since), _date_option(until)

    async def action(store):
        folder_id = resolve(store.folders, folder_ref, "folder").id if folder_ref else None
        criteria = EntryFilter(
            search_query=search,
            start_date=start,
            end_date=end,
            folder_id=folder_id,
            all_folders=all_folders,
        )
        entries = store.filter_entries(criteria)
        if tag:
            entries = [e for e in entries if normalize_tag(tag) in e.tags]
        return entries, {c.id: c for c in store.categories}

    entries, categories = run_with_store(ctx, action)
    if not entries:
        click.echo("No entries found.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Created", no_wrap=True)
    table.add_column("Tags")
    table.add_column("Category")
    table.add_column("Mood", justify="right")
    for entry in entries:
        category = categories.get(entry.category)
        table.add_row(
            entry.id,
            escape(entry.title),
            entry.created_at.strftime("%Y-%m-%d %H:%M"),
            escape(", ".join(entry.tags)),
            escape(category.name) if category else "",
            Text(f"{entry.sentiment:+.2f}", style=Style(color=sentiment_color(entry.sentiment)))
            if entry.sentiment is not None
            else "",
        )
    get_console().print(table)


@click.command()
@click.argument("entry_ref")
@click.pass_context
def show(ctx: click.Context, entry_ref: str) -> None:
    """Print one entry."""

    async def action(store):
        entry = resolve(store.entries, entry_ref, "entry")
        folder = store.get_folder(entry.folder_id) if entry.folder_id else None
        category = store.get_category(entry.category) if entry.category else None
        return entry, folder, category

    entry, folder, category = run_with_store(ctx, action)
    click.echo(entry.title)
    click.echo(f"id:        {entry.id}")
    click.echo(f"created:   {entry.created_at.isoformat()}")
    click.echo(f"updated:   {entry.updated_at.isoformat()}")
    click.echo(f"folder:    {folder.name if folder else entry.folder_id or '(root)'}")
    click.echo(f"tags:      {', '.join(entry.tags) or '-'}")
    click.echo(f"category:  {category.name if category else '-'}")
    if entry.sentiment is not None:
        click.echo(f"sentiment: {entry.sentiment:+.2f}")
    click.echo("")
    click.echo(entry.content)


@click.command()
@click.argument("entry_ref")
@click.option("--title", default=None, help="New title.")
@click.option("--content", "-c", default=None, help="New body text.")
@click.pass_context
def edit(ctx: click.Context, entry_ref: str, title: str | None, content: str | None) -> None:
    """Change an entry's title or content."""
    from daybook.journal import EntrySession

    if title is None and content is None:
        raise click.UsageError("Nothing to change: pass --title and/or --content.")

    async def action(store):
        session = EntrySession(store, resolve(store.entries, entry_ref, "entry"))
        session.edit(title=title, content=content)
        await session.close()
        return session.entry

    entry = run_with_store(ctx, action)
    click.echo(f"Saved entry {entry.id}")


@click.command()
@click.argument("entry_ref")
@click.pass_context
def delete(ctx: click.Context, entry_ref: str) -> None:
    """Delete an entry."""

    async def action(store):
        entry = resolve(store.entries, entry_ref, "entry")
        await store.delete_entry(entry.id)
        return entry

    entry = run_with_store(ctx, action)
    click.echo(f"Deleted entry {entry.id}")


@click.command()
@click.argument("entry_ref")
@click.argument("tags", nargs=-1, required=True)
@click.pass_context
def tag(ctx: click.Context, entry_ref: str, tags: tuple[str, ...]) -> None:
    """Add tags to an entry."""

    async def action(store):
        entry = resolve(store.entries, entry_ref, "entry")
        for t in tags:
            await store.add_tag_to_entry(entry.id, t)
        return store.get_entry(entry.id)

    entry = run_with_store(ctx, action)
    click.echo(f"Tags: {', '.join(entry.tags)}")


@click.command()
@click.argument("entry_ref")
@click.argument("tags", nargs=-1, required=True)
@click.pass_context
def untag(ctx: click.Context, entry_ref: str, tags: tuple[str, ...]) -> None:
    """Remove tags from an entry."""

    async def action(store):
        entry = resolve(store.entries, entry_ref, "entry")
        for t in tags:
            await store.remove_tag_from_entry(entry.id, t)
        return store.get_entry(entry.id)

    entry = run_with_store(ctx, action)
    click.echo(f"Tags: {', '.join(entry.tags) or '-'}")


@click.command()
@click.pass_context
def tags(ctx: click.Context) -> None:
    """List every tag with the number of entries using it."""

    async def action(store):
        return store.get_tag_counts()

    counts = run_with_store(ctx, action)
    if not counts:
        click.echo("No tags yet.")
        return
    for name, count in counts.items():
        click.echo(f"{name} ({count})")


@click.command()
@click.argument("entry_ref")
@click.argument("folder_id", required=False)
@click.pass_context
def move(ctx: click.Context, entry_ref: str, folder_id: str | None) -> None:
    """Move an entry into a folder, or back to the root when FOLDER_ID is omitted."""

    async def action(store):
        entry = resolve(store.entries, entry_ref, "entry")
        target = folder_id
        if folder_id:
            # Unknown folder ids are stored as given
            match = [f for f in store.folders if f.id == folder_id or f.id.startswith(folder_id)]
            if len(match) == 1:
                target = match[0].id
        await store.move_entry(entry.id, target)
        return entry, target

    entry, target = run_with_store(ctx, action)
    click.echo(f"Moved entry {entry.id} to {target or 'root'}")


@click.command()
@click.argument("entry_ref")
@click.option("--url", default="", help="Public page URL for link-based networks.")
@click.pass_context
def share(ctx: click.Context, entry_ref: str, url: str) -> None:
    """Print share text and links for an entry."""
    from daybook.journal.share import share_links, share_text

    async def action(store):
        return resolve(store.entries, entry_ref, "entry")

    entry = run_with_store(ctx, action)
    links = share_links(entry, page_url=url)
    click.echo(share_text(entry))
    click.echo("")
    click.echo(f"twitter:  {links.twitter}")
    click.echo(f"facebook: {links.facebook}")
    click.echo(f"linkedin: {links.linkedin}")
    click.echo(f"email:    {links.email}")
