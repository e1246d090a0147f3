"""
Bump Commands - Version bump without regenerating artifacts.

Commands:
- bump: Bump plugin.json and marketplace.json
"""

import sys

import click

from skillbook.cli_commands import get_config, root_option
from skillbook.version import BUMP_KINDS


def register(cli):
    """Register bump commands with CLI."""

    @cli.command("bump")
    @click.argument("kind", type=click.Choice(BUMP_KINDS))
    @root_option
    @click.option("--dry-run", is_flag=True, help="Show the new version without writing.")
    def bump_cmd(kind: str, root: str, dry_run: bool):
        """Bump plugin and marketplace versions.

        Descriptions are rewritten from the current skill counts.

        \b
        Examples:
            skillbook bump patch
            skillbook bump minor --dry-run
        """
        from skillbook.errors import SkillbookError
        from skillbook.models.catalog import load_catalog
        from skillbook.sync import bump_descriptors

        config = get_config(root)

        try:
            catalog = load_catalog(config.meta_file)
            result = bump_descriptors(config, catalog, kind, dry_run=dry_run)
        except SkillbookError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        click.echo(f"Version: {result.old_version} -> {result.new_version} ({kind})")
        click.echo(f"Skills: {result.total} total, {result.workflow} workflow, {result.domain} domain")
        if dry_run:
            click.echo("Dry run, nothing written.")
            return
        for path in result.written:
            click.echo(f"Written: {path}")
