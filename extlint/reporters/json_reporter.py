import click
from .base import BaseReporter
from extlint.snapshot.models import ProjectSnapshot

class JsonReporter(BaseReporter):
    def __init__(self, output_path: str = "extlint_report.json"):
        self.output_path = output_path

    def report(self, snapshot: ProjectSnapshot) -> None:
        with open(self.output_path, "w", encoding="utf-8") as f:
            f.write(snapshot.model_dump_json(indent=2))
        click.echo(f"JSON report saved to {self.output_path}")
