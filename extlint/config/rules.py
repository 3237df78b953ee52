from __future__ import annotations
from typing import Any, List, Literal

from pydantic import BaseModel, Field, field_validator

from extlint.config.extensions import PolicyConfig, normalize_options, validate_options


class ImportExtensionsRuleConfig(BaseModel):
    """Configuration for the import-extensions rule."""
    enabled: bool = Field(True, description="Whether to run the import-extensions rule.")
    severity: Literal["info", "warning", "error"] = Field("error", description="Severity assigned to reported issues.")
    options: List[Any] = Field(default_factory=list, description="Raw option list: a policy string and/or pattern objects.")

    @field_validator("options", mode="before")
    @classmethod
    def wrap_single_option(cls, value):
        if value is None:
            return []
        if isinstance(value, (str, dict)):
            return [value]
        return value

    def policy(self) -> PolicyConfig:
        """Validates the raw options and folds them into a PolicyConfig."""
        return normalize_options(validate_options(self.options))

    @classmethod
    def default(cls) -> "ImportExtensionsRuleConfig":
        return cls()
