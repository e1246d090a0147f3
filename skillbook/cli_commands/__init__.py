"""
Skillbook CLI Commands - Modular command structure.

Each submodule registers its commands when imported.

Structure:
    cli_commands/
    ├── __init__.py      # This file - registration
    ├── sync_cmd.py      # sync
    ├── bump_cmd.py      # bump
    ├── check_cmd.py     # check
    └── config_cmd.py    # config

Usage:
    from skillbook.cli_commands import register_all

    @click.group()
    def cli():
        pass

    register_all(cli)
"""

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from skillbook.config import SyncConfig


root_option = click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=".",
    envvar="SKILLBOOK_ROOT",
    show_default=True,
    help="Plugin root (holds tools/, skills/ and .claude-plugin/).",
)


def get_config(root: str) -> "SyncConfig":
    """Load the sync configuration for a plugin root."""
    from skillbook.config import load_config
    return load_config(root)


def register_all(cli: "click.Group") -> None:
    """Register all command modules with the CLI group.

    Each module has a `register(cli)` function that adds its commands
    to the CLI group using Click decorators.

    Args:
        cli: The Click group to register commands with
    """
    from . import sync_cmd
    from . import bump_cmd
    from . import check_cmd
    from . import config_cmd

    sync_cmd.register(cli)
    bump_cmd.register(cli)
    check_cmd.register(cli)
    config_cmd.register(cli)


__all__ = ["register_all", "root_option", "get_config"]
