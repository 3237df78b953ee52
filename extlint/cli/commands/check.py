import click
from pathlib import Path

from extlint.config.extensions import OptionsValidationError
from extlint.config.rules import ImportExtensionsRuleConfig
from extlint.config.settings import ResolverSettings
from extlint.reporters import ConsoleReporter, JsonReporter
from extlint.resolve.node_resolver import NodeModuleResolver
from extlint.rules.engine import RuleEngine
from extlint.rules.import_extensions import get_import_rules
from extlint.snapshot.builder import ImportSnapshotBuilder
from extlint.utils.logging import get_logger

logger = get_logger(__name__)


@click.command('check')
@click.argument('path', type=click.Path(exists=True, dir_okay=True))
@click.option('--reporter', '-r', type=click.Choice(['console', 'json']), default='console', help='Reporter to use.')
@click.option('--output', '-o', help='Output path for the JSON reporter.')
@click.option('--fail-on-error', is_flag=True, help='Exit with non-zero code if error severity issues are found.')
@click.option('--commonjs', is_flag=True, help='Also check static require() calls.')
@click.pass_context
def check(ctx, path, reporter, output, fail_on_error, commonjs):
    """
    Check import specifiers under PATH against the extension policy.
    """
    raw_config = ctx.obj.config
    try:
        rule_config = ImportExtensionsRuleConfig(**raw_config["rules"].get("import_extensions", {}))
        rules = get_import_rules(rule_config, force_commonjs=commonjs)
        settings = ResolverSettings(**raw_config.get("settings", {}))
    except (OptionsValidationError, ValueError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        ctx.exit(2)

    builder = ImportSnapshotBuilder(Path(path), raw_config)
    snapshot = builder.build()
    root = builder.scan_root()

    engine = RuleEngine(rules=rules)
    snapshot = engine.run(
        snapshot,
        rule_config,
        resolver_factory=lambda file: NodeModuleResolver(root / file.path, settings),
    )
    logger.info("check_finished", files=len(snapshot.files), issues=snapshot.issues_summary.total_issues)

    if reporter == 'console':
        ConsoleReporter().report(snapshot)
    else:
        JsonReporter(output_path=output or "extlint_report.json").report(snapshot)

    if fail_on_error and snapshot.issues_summary and snapshot.issues_summary.by_severity.get('error', 0) > 0:
        click.echo("Failure: import extension errors detected.", err=True)
        ctx.exit(1)
