import click
import os
import yaml

from extlint.config.defaults import DEFAULT_CONFIG
from extlint.config.extensions import OptionsValidationError
from extlint.config.loader import PROJECT_CONFIG_NAME
from extlint.config.rules import ImportExtensionsRuleConfig
from extlint.config.settings import ResolverSettings
from extlint.utils.file_utils import write_yaml_file


@click.group()
def config():
    """Manage the extlint configuration."""
    pass


@config.command('init')
@click.option('--force', is_flag=True, help='Overwrite an existing configuration file.')
def init(force):
    """Initialize a new configuration file."""
    if os.path.exists(PROJECT_CONFIG_NAME) and not force:
        click.echo(f"Configuration file already exists at {PROJECT_CONFIG_NAME}", err=True)
        click.echo("Use --force to overwrite.")
        return

    write_yaml_file(DEFAULT_CONFIG, PROJECT_CONFIG_NAME)
    click.echo(f"Configuration file created at {PROJECT_CONFIG_NAME}")


def _rule_config(ctx) -> ImportExtensionsRuleConfig:
    return ImportExtensionsRuleConfig(**ctx.obj.config["rules"].get("import_extensions", {}))


@config.command('validate')
@click.pass_context
def validate(ctx):
    """Validate the effective configuration."""
    try:
        _rule_config(ctx).policy()
        ResolverSettings(**ctx.obj.config.get("settings", {}))
    except (OptionsValidationError, ValueError) as e:
        click.echo(f"Configuration is invalid:\n{e}", err=True)
        ctx.exit(1)
    click.echo("Configuration is valid.")


@config.command('show')
@click.pass_context
def show(ctx):
    """Show the normalized extension policy."""
    try:
        rule_config = _rule_config(ctx)
        policy = rule_config.policy()
    except (OptionsValidationError, ValueError) as e:
        click.echo(f"Configuration is invalid:\n{e}", err=True)
        ctx.exit(1)

    data = {
        "enabled": rule_config.enabled,
        "severity": rule_config.severity,
        "policy": policy.model_dump(mode="json"),
    }
    click.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
