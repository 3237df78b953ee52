from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from extlint.utils.logging import get_logger

logger = get_logger(__name__)

STRUCTURED_KEYS = ("pattern", "ignorePackages")


class Modifier(str, Enum):
    ALWAYS = "always"
    IGNORE_PACKAGES = "ignorePackages"
    NEVER = "never"


class OptionsValidationError(ValueError):
    """Raised when a rule option list does not match any accepted shape."""


class PolicyEntry(BaseModel):
    """A bare policy string; sets the default modifier."""
    model_config = ConfigDict(frozen=True)

    modifier: Modifier


class LegacyPatternEntry(RootModel[Dict[str, Modifier]]):
    """A flat ``{extension: modifier}`` map merged directly into the pattern."""


class StructuredEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    pattern: Optional[Dict[str, Modifier]] = Field(None, description="Per-extension modifiers.")
    ignore_packages: Optional[bool] = Field(None, alias="ignorePackages", description="Exempt package mains from required extensions.")
    commonjs: Optional[bool] = Field(None, description="Also check static require() calls.")


OptionEntry = Union[PolicyEntry, LegacyPatternEntry, StructuredEntry]


class PolicyConfig(BaseModel):
    """The canonical, read-only policy built once from the option list."""
    model_config = ConfigDict(frozen=True)

    default_config: Modifier = Field(Modifier.NEVER, description="Modifier for extensions without an override.")
    pattern: Dict[str, Modifier] = Field(default_factory=dict, description="Per-extension overrides, keys without the leading dot.")
    ignore_packages: bool = Field(False, description="Exempt package mains from the required direction.")
    commonjs: bool = Field(False, description="Also check static require() calls.")


def _is_legacy_map(raw: Dict[str, Any]) -> bool:
    if any(key in raw for key in STRUCTURED_KEYS):
        return False
    # {"commonjs": true} has no pattern values; only modifier strings make a legacy map.
    return all(isinstance(value, str) for value in raw.values())


def parse_option_entry(raw: Any) -> OptionEntry:
    """
    Resolves one raw option value into its tagged entry type.

    Raises:
        OptionsValidationError: if the value fits none of the accepted shapes.
    """
    try:
        if isinstance(raw, str):
            return PolicyEntry(modifier=raw)
        if isinstance(raw, dict):
            if _is_legacy_map(raw):
                return LegacyPatternEntry.model_validate(raw)
            return StructuredEntry.model_validate(raw)
    except ValidationError as e:
        raise OptionsValidationError(f"Invalid option entry {raw!r}: {e}") from e
    raise OptionsValidationError(
        f"Invalid option entry {raw!r}: expected a policy string or a mapping."
    )


# The shape sequences accepted for the whole option list.
_ACCEPTED_SHAPES = (
    (),
    (PolicyEntry,),
    (PolicyEntry, StructuredEntry),
    (StructuredEntry,),
    (LegacyPatternEntry,),
    (PolicyEntry, LegacyPatternEntry),
)


def validate_options(options: Sequence[Any]) -> List[OptionEntry]:
    """
    Validates a raw option list and returns its parsed entries.

    At most two entries are accepted, and a policy string may only lead.
    """
    if isinstance(options, (str, dict)):
        options = [options]
    entries = [parse_option_entry(raw) for raw in options]
    shape = tuple(type(entry) for entry in entries)
    if shape not in _ACCEPTED_SHAPES:
        names = ", ".join(t.__name__ for t in shape)
        raise OptionsValidationError(
            f"Unsupported option list ({names}): expected a policy string "
            "optionally followed by one pattern mapping or structured object."
        )
    return entries


def normalize_options(options: Sequence[Any]) -> PolicyConfig:
    """
    Folds an ordered option list into one PolicyConfig.

    Later entries override earlier ones; pattern maps are merged key by key.
    """
    default_config = Modifier.NEVER
    pattern: Dict[str, Modifier] = {}
    ignore_packages = False
    commonjs = False

    for entry in options:
        if not isinstance(entry, (PolicyEntry, LegacyPatternEntry, StructuredEntry)):
            entry = parse_option_entry(entry)

        if isinstance(entry, PolicyEntry):
            default_config = entry.modifier
        elif isinstance(entry, LegacyPatternEntry):
            pattern.update(entry.root)
        else:
            if entry.pattern is not None:
                pattern.update(entry.pattern)
            if entry.ignore_packages is not None:
                ignore_packages = entry.ignore_packages
            if entry.commonjs is not None:
                commonjs = entry.commonjs

    config = PolicyConfig(
        default_config=default_config,
        pattern=pattern,
        ignore_packages=ignore_packages,
        commonjs=commonjs,
    )
    logger.debug(
        "policy_normalized",
        default_config=config.default_config.value,
        pattern={ext: mod.value for ext, mod in config.pattern.items()},
        ignore_packages=config.ignore_packages,
        commonjs=config.commonjs,
    )
    return config
