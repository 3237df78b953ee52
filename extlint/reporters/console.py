from .base import BaseReporter
from extlint.snapshot.models import ProjectSnapshot
import click

SEVERITY_COLORS = {"error": "red", "warning": "yellow", "info": "blue"}


class ConsoleReporter(BaseReporter):
    def report(self, snapshot: ProjectSnapshot) -> None:
        for file in snapshot.files:
            for issue in file.issues:
                location = f"{file.path}:{issue.location.line}"
                if issue.location.column:
                    location += f":{issue.location.column}"
                severity = click.style(issue.severity.upper(), fg=SEVERITY_COLORS.get(issue.severity))
                click.echo(f"[{severity}] {location} - {issue.message} ({issue.rule_id})")

        # Summary
        click.echo("-" * 40)
        click.echo(f"Project: {snapshot.metadata.project_name}")
        click.echo(f"Files Scanned: {len(snapshot.files)}")

        if snapshot.issues_summary:
            click.echo(f"Total Issues: {snapshot.issues_summary.total_issues}")
            for severity, count in snapshot.issues_summary.by_severity.items():
                click.echo(f"  {severity.upper()}: {count}")
        else:
            click.echo("No issues summary available.")
        click.echo("-" * 40)
