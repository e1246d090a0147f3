"""
Sync Commands - Regenerate artifacts from skills-meta.json.

Commands:
- sync: data.ts + legacy mirror + optional version bump
"""

import json
import sys

import click

from skillbook.cli_commands import get_config, root_option
from skillbook.version import BUMP_KINDS


def register(cli):
    """Register sync commands with CLI."""

    @cli.command("sync")
    @root_option
    @click.option("--bump", "bump_kind", type=click.Choice(BUMP_KINDS), default=None,
                  help="Also bump plugin.json and marketplace.json versions.")
    @click.option("--no-legacy", is_flag=True, help="Skip the legacy markdown mirror.")
    @click.option("--write-meta", is_flag=True,
                  help="Write refreshed lineCount values back to skills-meta.json.")
    @click.option("--json", "as_json", is_flag=True, help="Output the run summary as JSON.")
    def sync_cmd(root: str, bump_kind: str, no_legacy: bool, write_meta: bool, as_json: bool):
        """Regenerate data.ts and the legacy mirror from skills-meta.json.

        \b
        Examples:
            skillbook sync
            skillbook sync --bump patch
            skillbook sync --no-legacy
            skillbook sync --json
        """
        from skillbook.errors import SkillbookError
        from skillbook.sync import run_sync

        config = get_config(root)

        if not as_json:
            click.echo(f"Reading {config.meta_file}...")
        try:
            result = run_sync(
                config,
                bump=bump_kind,
                legacy=not no_legacy,
                write_meta=write_meta,
            )
        except SkillbookError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            return

        click.echo(f"Written: {result.data_ts_path}")
        click.echo(f"  Skills: {result.skills}")
        if result.meta_written:
            click.echo(f"Written: {result.meta_path}")
        if result.orphans:
            click.echo(f"Warning: unknown category for {', '.join(result.orphans)}", err=True)

        if result.legacy:
            click.echo(f"Legacy mirror: {result.legacy.legacy_dir}")
            click.echo(f"  Synced: {result.synced}")
            click.echo(f"  Skipped: {result.skipped}")
            for skill_id in result.legacy.skipped:
                click.echo(f"    - {skill_id}")
            click.echo(f"  Removed: {result.removed}")
        else:
            click.echo("Legacy mirror: skipped (--no-legacy)")

        if result.bump:
            bump = result.bump
            click.echo(f"Bumped version: {bump.old_version} -> {bump.new_version} ({bump.kind})")
            click.echo(f"  Skills: {bump.total} total, {bump.workflow} workflow, {bump.domain} domain")
            for path in bump.written:
                click.echo(f"  Written: {path}")

        click.echo("Done.")
