from typing import Callable, Dict, List

from extlint.config.rules import ImportExtensionsRuleConfig
from extlint.resolve.interfaces import ModuleResolver
from extlint.rules.base import BaseRule, RuleContext
from extlint.snapshot.models import FileSnapshot, ProjectIssuesSummary, ProjectSnapshot
from extlint.utils.logging import get_logger

logger = get_logger(__name__)

ResolverFactory = Callable[[FileSnapshot], ModuleResolver]


class RuleEngine:
    def __init__(self, rules: List[BaseRule]) -> None:
        self._rules = rules

    def run(
        self,
        project: ProjectSnapshot,
        config: ImportExtensionsRuleConfig,
        resolver_factory: ResolverFactory,
    ) -> ProjectSnapshot:
        for file in project.files:
            ctx = RuleContext(project=project, file=file, config=config, resolver=resolver_factory(file))
            file_issues = []
            for rule in self._rules:
                file_issues.extend(rule.check(ctx))
            file.issues = file_issues
            if file_issues:
                logger.debug("file_checked", path=file.path, issues=len(file_issues))

        project.issues_summary = self._summarize_issues(project)
        return project

    def _summarize_issues(self, project: ProjectSnapshot) -> ProjectIssuesSummary:
        total = 0
        by_severity: Dict[str, int] = {}
        by_rule: Dict[str, int] = {}

        for file in project.files:
            for issue in file.issues:
                total += 1
                by_severity[issue.severity] = by_severity.get(issue.severity, 0) + 1
                by_rule[issue.rule_id] = by_rule.get(issue.rule_id, 0) + 1

        return ProjectIssuesSummary(
            total_issues=total,
            by_severity=by_severity,
            by_rule=by_rule,
        )
