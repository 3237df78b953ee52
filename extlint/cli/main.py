import click
from pathlib import Path
from typing import Any, Dict, Optional

from extlint import __version__
from extlint.config.loader import load_config
from extlint.utils.logging import setup_logging

from .commands.check import check
from .commands.config import config


class CliContext:
    def __init__(self, config: Dict[str, Any], config_path: Optional[str] = None):
        self.config = config
        self.config_path = config_path


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Path to a project config file.')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON.')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, config_path, verbose, json_logs):
    """
    extlint: enforce a file-extension policy on import specifiers.
    """
    setup_logging("DEBUG" if verbose else "WARNING", json_logs=json_logs)
    project_path = Path(config_path).parent if config_path else Path.cwd()
    try:
        raw_config = load_config(str(project_path), config_file=config_path)
    except ValueError as e:
        raise click.ClickException(str(e))

    ctx.obj = CliContext(config=raw_config, config_path=config_path)

main.add_command(check)
main.add_command(config)

if __name__ == '__main__':
    main()
