"""
Configuration Commands - Sync settings.

Commands:
- config: Show the resolved configuration, or write the defaults
"""

import click

from skillbook.cli_commands import get_config, root_option


def register(cli):
    """Register configuration commands with CLI."""

    @cli.command("config")
    @root_option
    @click.option("--init", "init_config", is_flag=True,
                  help="Write .skillbook/config.json with the current settings.")
    def config_cmd(root: str, init_config: bool):
        """Show sync configuration.

        \b
        Examples:
            skillbook config
            skillbook config --init
        """
        from skillbook.config import get_config_path, save_config

        config = get_config(root)

        if init_config:
            save_config(root, config)
            click.echo(f"Written: {get_config_path(root)}")
            return

        source = get_config_path(root)
        click.echo(f"Configuration ({source if source.exists() else 'defaults'}):")
        click.echo(f"  Catalog: {config.meta_file}")
        click.echo(f"  data.ts: {config.data_ts_file}")
        click.echo(f"  Skills: {config.skills_root}")
        click.echo(f"  Legacy mirror: {config.legacy_root}")
        click.echo(f"  Index: {config.index_file}")
        click.echo(f"  plugin.json: {config.plugin_json_file}")
        click.echo(f"  marketplace.json: {config.marketplace_json_file}")
        click.echo(f"  Workflow skills: {len(config.workflow_ids)}")
        click.echo(f"  Excluded from mirror: {', '.join(config.excluded_ids) or 'none'}")
