from typing import List, Optional

from extlint.config.extensions import PolicyConfig
from extlint.config.rules import ImportExtensionsRuleConfig
from extlint.rules.base import BaseRule, RuleContext
from extlint.rules.extension_checker import ExtensionChecker
from extlint.snapshot.models import Issue, IssueLocation


class ImportExtensionsRule(BaseRule):
    rule_id = "IMPORT_EXTENSIONS"
    description = "Ensures consistent use of file extensions within import paths."
    default_severity = "error"

    def __init__(self, policy: PolicyConfig, severity: Optional[str] = None):
        self.policy = policy
        self.severity = severity or self.default_severity

    def check(self, ctx: RuleContext) -> List[Issue]:
        issues = []
        checker = ExtensionChecker(self.policy, ctx.resolver)

        for record in ctx.file.imports:
            diagnostic = checker.check_record(record)
            if diagnostic is None:
                continue
            loc = IssueLocation(
                file_path=ctx.file.path,
                line=record.line,
                column=record.column,
            )
            issues.append(Issue(
                rule_id=self.rule_id,
                severity=self.severity,
                message=diagnostic.message,
                location=loc,
                symbol=record.specifier,
                tags=["imports", f"{diagnostic.kind}-extension"],
            ))
        return issues


def get_import_rules(config: ImportExtensionsRuleConfig, force_commonjs: bool = False) -> List[BaseRule]:
    """Builds the enabled rules; the policy is normalized once here."""
    rules: List[BaseRule] = []
    if config.enabled:
        policy = config.policy()
        if force_commonjs:
            policy = policy.model_copy(update={"commonjs": True})
        rules.append(ImportExtensionsRule(policy, severity=config.severity))
    return rules
