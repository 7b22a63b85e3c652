"""Rendering configuration for boxtable tables."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Any

from .exceptions import InvalidPaddingError, ValidationError

DEFAULT_PADDING = 1

ENV_PREFIX = "BOXTABLE_"
"""Prefix of the environment variables read by ``TableConfig.from_environment()``."""


def validate_padding(padding: Any) -> None:
    """
    Validate a padding value.

    Args:
        padding: Number of spaces placed left and right of each cell

    Raises:
        InvalidPaddingError: If padding is not an integer or is negative
    """
    if isinstance(padding, bool) or not isinstance(padding, int):
        raise InvalidPaddingError(padding, "Padding must be an integer")
    if padding < 0:
        raise InvalidPaddingError(padding)


def _env_flag(name: str, value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ValidationError(name, value, "Expected an integer") from e


@dataclass(frozen=True)
class TableConfig:
    """
    Settings that control how a table is rendered.

    Instances are immutable; ``Table`` swaps in a new instance on every
    setting change so that validation runs before anything is stored.

    Attributes:
        padding: Spaces placed left and right of every cell's content
        header_align_right: Right-align header cells
        row_align_right: Right-align data row cells
        footer_align_right: Right-align footer cells
        caching_enabled: Memoize the rendered text until the next mutation
    """

    padding: int = DEFAULT_PADDING
    header_align_right: bool = False
    row_align_right: bool = False
    footer_align_right: bool = False
    caching_enabled: bool = True

    def __post_init__(self) -> None:
        validate_padding(self.padding)

    @classmethod
    def from_environment(cls) -> TableConfig:
        """Create TableConfig from ``BOXTABLE_*`` environment variables."""
        return cls(**cls.environment_settings())

    @classmethod
    def environment_settings(cls, skip: Iterable[str] = ()) -> dict[str, Any]:
        """
        Read the settings present in ``BOXTABLE_*`` environment variables.

        The values are parsed but not validated, so a caller layering
        other sources on top can still override a bad value. Unset
        variables are left out.

        Args:
            skip: Setting names not to read

        Returns:
            Mapping of setting name to parsed value

        Raises:
            ValidationError: If ``BOXTABLE_PADDING`` is not an integer
        """
        settings: dict[str, Any] = {}
        for name in cls.field_names():
            var = f"{ENV_PREFIX}{name.upper()}"
            value = os.environ.get(var)
            if name in skip or value is None:
                continue
            parse = _env_int if name == "padding" else _env_flag
            settings[name] = parse(var, value)
        return settings

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all settings, in declaration order."""
        return tuple(f.name for f in fields(cls))

    def as_dict(self) -> dict[str, Any]:
        """Return settings as a dictionary."""
        return {name: getattr(self, name) for name in self.field_names()}
