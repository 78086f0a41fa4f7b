"""Shared Prettier configuration.

PRETTIER_CONFIG is the style record published by the shared config package. It is a
read-only mapping; use render_prettier_config() to get the JSON form Prettier loads.
"""

import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

PRETTIER_CONFIG: Mapping[str, Any] = MappingProxyType(
    {
        "semi": True,
        "trailingComma": "none",
        "singleQuote": False,
        "useTabs": False,
        "tabWidth": 2,
        "printWidth": 100,
        "jsxSingleQuote": False,
        "bracketSameLine": False,
        "bracketSpacing": True,
        "arrowParens": "avoid",
        "endOfLine": "lf",
    }
)

BOOLEAN_OPTIONS = frozenset(
    {"semi", "singleQuote", "useTabs", "jsxSingleQuote", "bracketSameLine", "bracketSpacing"}
)
POSITIVE_INT_OPTIONS = frozenset({"tabWidth", "printWidth"})
CHOICE_OPTIONS: dict[str, frozenset[str]] = {
    "trailingComma": frozenset({"none", "es5", "all"}),
    "arrowParens": frozenset({"avoid", "always"}),
    "endOfLine": frozenset({"lf", "crlf", "cr", "auto"}),
}
KNOWN_OPTIONS = BOOLEAN_OPTIONS | POSITIVE_INT_OPTIONS | frozenset(CHOICE_OPTIONS)


def validate_prettier_config(config: Mapping[str, Any]) -> list[str]:
    """Validate a Prettier config record.

    Args:
        config: Option name to value mapping

    Returns:
        List of validation errors (empty if valid)

    Checks:
        - No unknown option names
        - Boolean options are bool
        - tabWidth/printWidth are positive integers
        - Enumerated options use a supported value
    """
    errors: list[str] = []

    for key in config:
        if key not in KNOWN_OPTIONS:
            errors.append(f"Unknown option: {key}")

    for key in sorted(k for k in BOOLEAN_OPTIONS if k in config):
        if not isinstance(config[key], bool):
            errors.append(f"{key} must be boolean")

    for key in sorted(k for k in POSITIVE_INT_OPTIONS if k in config):
        value = config[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(f"{key} must be a positive integer")

    for key, allowed in CHOICE_OPTIONS.items():
        if key in config and config[key] not in allowed:
            errors.append(f"{key} must be one of {'/'.join(sorted(allowed))}")

    return errors


def render_prettier_config(config: Mapping[str, Any] = PRETTIER_CONFIG) -> str:
    """Serialize a config record as a standalone .prettierrc JSON document."""
    return json.dumps(dict(config), indent=2) + "\n"
