"""
Check Commands - Catalog consistency report.

Commands:
- check: Report unknown categories, missing sources, frontmatter mismatches
"""

import json
import sys

import click

from skillbook.cli_commands import get_config, root_option


def register(cli):
    """Register check commands with CLI."""

    @cli.command("check")
    @root_option
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    def check_cmd(root: str, as_json: bool):
        """Check skills-meta.json against the SKILL.md sources.

        Exits with status 1 when any problem is found.
        """
        from skillbook.check import check_catalog
        from skillbook.errors import SkillbookError
        from skillbook.models.catalog import load_catalog

        config = get_config(root)

        try:
            catalog = load_catalog(config.meta_file)
        except SkillbookError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        report = check_catalog(catalog, config.skills_root)

        if as_json:
            click.echo(json.dumps({
                "skills": report.skills,
                "issues": [i.to_dict() for i in report.issues],
            }, indent=2, ensure_ascii=False))
        elif report.ok:
            click.echo(f"OK: {report.skills} skills, no issues.")
        else:
            click.echo(f"{len(report.issues)} issue(s) in {report.skills} skills:")
            for issue in report.issues:
                label = f"{issue.skill_id}: " if issue.skill_id else ""
                click.echo(f"  [{issue.kind}] {label}{issue.message}")

        if not report.ok:
            sys.exit(1)
