"""
Skillbook CLI - Keep the skill catalog and its artifacts in sync.

Commands:
- sync: Regenerate data.ts and the legacy mirror, optionally bump versions
- bump: Bump plugin/marketplace versions only
- check: Report catalog inconsistencies
- config: Show or write the sync configuration
"""

import logging

import click

from skillbook import __version__
from skillbook.cli_commands import register_all


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log progress (INFO level).")
def cli(verbose: bool):
    """Skillbook - skill catalog synchronization.

    Reads tools/skills-meta.json and regenerates the site's data.ts,
    the legacy markdown mirror, and the plugin descriptors.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


register_all(cli)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
