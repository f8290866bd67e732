"""Shared setup logic for CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import TypeVar

import click

DAYBOOK_DIR = Path.home() / ".daybook"
CONFIG_PATH = DAYBOOK_DIR / "config.yaml"

T = TypeVar("T")
R = TypeVar("R")


def load_config(data_dir: str | None = None, config_file: str | None = None):
    """Load config from ``config_file`` (default ~/.daybook/config.yaml)."""
    from daybook.core.config import Config

    return Config(config_file=config_file or str(CONFIG_PATH), data_dir=data_dir)


def open_store(config):
    """Build a JournalStore over the configured local storage directory (not yet loaded)."""
    from daybook.core.storage import LocalStorage
    from daybook.journal import JournalConfig, JournalStore

    backend = LocalStorage(base_path=config.get_storage_dir())
    return JournalStore(backend, JournalConfig.from_config(config))


def run_with_store(ctx: click.Context, action: Callable[..., Awaitable[R]]) -> R:
    """Load the journal and run ``action(store)`` to completion."""
    config = ctx.obj["config"]

    async def _run():
        store = open_store(config)
        await store.load()
        return await action(store)

    return asyncio.run(_run())


def resolve(records: Sequence[T], ref: str, kind: str) -> T:
    """Find a record by full id or unique id prefix, or fail the command."""
    for record in records:
        if record.id == ref:
            return record
    matches = [r for r in records if r.id.startswith(ref)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise click.ClickException(f"No {kind} matches '{ref}'.")
    raise click.ClickException(f"'{ref}' is ambiguous: {len(matches)} {kind}s match.")


def get_console():
    try:
        from rich.console import Console
    except ImportError:
        raise click.ClickException("Install rich: pip install rich") from None
    return Console()
