from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field


class ResolverSettings(BaseModel):
    """Ambient settings shared by the module resolver and import-type predicates."""
    extensions: List[str] = Field(
        default_factory=lambda: [".mjs", ".js", ".json", ".node"],
        description="Suffixes tried, in order, when a specifier names a file without its extension.",
    )
    core_modules: List[str] = Field(
        default_factory=list,
        description="Extra module names treated as built-ins.",
    )
    external_module_folders: List[str] = Field(
        default_factory=lambda: ["node_modules"],
        description="Folder names that hold installed packages.",
    )

    @classmethod
    def default(cls) -> "ResolverSettings":
        return cls()
