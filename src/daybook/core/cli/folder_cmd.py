"""daybook folder / category: manage folders and categories."""

from __future__ import annotations

import click

from .common import resolve, run_with_store


@click.group()
def folder() -> None:
    """Manage folders."""


@folder.command(name="create")
@click.argument("name")
@click.pass_context
def folder_create(ctx: click.Context, name: str) -> None:
    """Create a folder."""

    async def action(store):
        return await store.create_folder(name)

    created = run_with_store(ctx, action)
    click.echo(f"Created folder {created.id} ({created.name})")


@folder.command(name="list")
@click.pass_context
def folder_list(ctx: click.Context) -> None:
    """List folders with their entry counts."""

    async def action(store):
        rows = [(f, len(store.get_entries_by_folder(f.id))) for f in store.folders]
        return rows, len(store.get_entries_by_folder(None))

    rows, root_count = run_with_store(ctx, action)
    click.echo(f"(root)  {root_count} entries")
    for f, count in rows:
        click.echo(f"{f.id}  {f.name}  {count} entries")


@folder.command(name="rename")
@click.argument("folder_ref")
@click.argument("name")
@click.pass_context
def folder_rename(ctx: click.Context, folder_ref: str, name: str) -> None:
    """Rename a folder."""

    async def action(store):
        target = resolve(store.folders, folder_ref, "folder")
        await store.rename_folder(target.id, name)
        return target

    target = run_with_store(ctx, action)
    click.echo(f"Renamed folder {target.id} to {name}")


@folder.command(name="delete")
@click.argument("folder_ref")
@click.pass_context
def folder_delete(ctx: click.Context, folder_ref: str) -> None:
    """Delete a folder. Its entries move back to the root."""

    async def action(store):
        target = resolve(store.folders, folder_ref, "folder")
        moved = len(store.get_entries_by_folder(target.id))
        await store.delete_folder(target.id)
        return target, moved

    target, moved = run_with_store(ctx, action)
    click.echo(f"Deleted folder {target.name}; {moved} entries moved to root")


@click.group()
def category() -> None:
    """Manage categories."""


@category.command(name="create")
@click.argument("name")
@click.option("--color", default=None, help="Display colour (default: next palette colour).")
@click.pass_context
def category_create(ctx: click.Context, name: str, color: str | None) -> None:
    """Create a category."""

    async def action(store):
        return await store.create_category(name, color)

    created = run_with_store(ctx, action)
    click.echo(f"Created category {created.id} ({created.name}, {created.color})")


@category.command(name="list")
@click.pass_context
def category_list(ctx: click.Context) -> None:
    """List categories."""

    async def action(store):
        return [(c, len(store.get_entries_by_category(c.id))) for c in store.categories]

    rows = run_with_store(ctx, action)
    if not rows:
        click.echo("No categories yet.")
        return
    for c, count in rows:
        click.echo(f"{c.id}  {c.name}  {c.color}  {count} entries")


@category.command(name="rename")
@click.argument("category_ref")
@click.argument("name")
@click.pass_context
def category_rename(ctx: click.Context, category_ref: str, name: str) -> None:
    """Rename a category."""

    async def action(store):
        target = resolve(store.categories, category_ref, "category")
        await store.rename_category(target.id, name)
        return target

    target = run_with_store(ctx, action)
    click.echo(f"Renamed category {target.id} to {name}")


@category.command(name="color")
@click.argument("category_ref")
@click.argument("color")
@click.pass_context
def category_color(ctx: click.Context, category_ref: str, color: str) -> None:
    """Change a category's colour."""

    async def action(store):
        target = resolve(store.categories, category_ref, "category")
        await store.update_category_color(target.id, color)
        return target

    target = run_with_store(ctx, action)
    click.echo(f"Category {target.name} is now {color}")


@category.command(name="delete")
@click.argument("category_ref")
@click.pass_context
def category_delete(ctx: click.Context, category_ref: str) -> None:
    """Delete a category and clear it from its entries."""

    async def action(store):
        target = resolve(store.categories, category_ref, "category")
        await store.delete_category(target.id)
        return target

    target = run_with_store(ctx, action)
    click.echo(f"Deleted category {target.name}")


@category.command(name="set")
@click.argument("entry_ref")
@click.argument("category_ref", required=False)
@click.pass_context
def category_set(ctx: click.Context, entry_ref: str, category_ref: str | None) -> None:
    """Assign a category to an entry, or clear it when CATEGORY_REF is omitted."""

    async def action(store):
        entry = resolve(store.entries, entry_ref, "entry")
        target = resolve(store.categories, category_ref, "category") if category_ref else None
        await store.set_entry_category(entry.id, target.id if target else None)
        return entry, target

    entry, target = run_with_store(ctx, action)
    click.echo(f"Entry {entry.id} category: {target.name if target else '-'}")
