from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, ConfigDict

# These imports are needed at runtime for Pydantic's model_rebuild to work.
from extlint.snapshot.models import ProjectSnapshot, FileSnapshot, Issue
from extlint.config.rules import ImportExtensionsRuleConfig
from extlint.resolve.interfaces import ModuleResolver


class RuleContext(BaseModel):
    """Provides the context in which a rule is executed."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    project: "ProjectSnapshot"
    file: "FileSnapshot"
    config: "ImportExtensionsRuleConfig"
    resolver: "ModuleResolver"


class BaseRule(ABC):
    """Abstract base class for a rule."""
    rule_id: str
    description: str
    default_severity: str = "error"

    @abstractmethod
    def check(self, ctx: RuleContext) -> List[Issue]:
        """
        Checks the given context for violations of this rule.

        Args:
            ctx: The context containing the file, the project and the file's resolver.

        Returns:
            A list of issues found, or an empty list if no issues are found.
        """
        raise NotImplementedError

# Resolve forward references in RuleContext now that all dependent models are imported.
RuleContext.model_rebuild()
