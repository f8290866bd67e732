"""Daybook CLI: entry point for journal, folder and category commands."""

import click

from daybook import __version__


@click.group()
@click.version_option(version=__version__, package_name="daybook")
@click.option("--data-dir", envvar="DAYBOOK_DATA_DIR", default=None, help="Journal data directory.")
@click.option("--config", "config_file", default=None, help="Path to a YAML/JSON config file.")
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, config_file: str | None) -> None:
    """Daybook: a personal journal in your terminal."""
    from daybook.core.utils.logging import setup_logging_from_config

    from .common import load_config

    config = load_config(data_dir=data_dir, config_file=config_file)
    setup_logging_from_config(config)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# Register subcommands
from .entry_cmd import delete, edit, list_entries, move, new, share, show, tag, tags, untag
from .folder_cmd import category, folder

for _command in (new, list_entries, show, edit, delete, tag, untag, tags, move, share, folder, category):
    main.add_command(_command)
