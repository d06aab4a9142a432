"""Configuration loading.

Builds FilterConfig from a plain mapping (e.g. parsed settings) with
environment fallback for strict property resolution.
"""

from __future__ import annotations

import os
from dataclasses import fields
from typing import TYPE_CHECKING

from attrfirst.domain.model.configuration import FilterConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

STRICT_ENV_VAR = "ATTRFIRST_STRICT"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def load_config(
    overrides: Mapping[str, object] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> FilterConfig:
    """Build FilterConfig from overrides.

    strict_properties falls back to the ATTRFIRST_STRICT environment
    variable when absent from overrides.

    Args:
        overrides: Field name -> value. None = defaults.
        environ: Environment mapping (default: os.environ).

    Returns:
        Validated FilterConfig

    Raises:
        ValueError: Unknown key or unparseable environment value.
    """
    values = dict(overrides or {})
    known = {f.name for f in fields(FilterConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {unknown}")

    env = os.environ if environ is None else environ
    if "strict_properties" not in values and STRICT_ENV_VAR in env:
        values["strict_properties"] = _parse_bool(env[STRICT_ENV_VAR])

    return FilterConfig(**values)  # type: ignore[arg-type]


def _parse_bool(raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{STRICT_ENV_VAR} must be a boolean flag, got {raw!r}")
