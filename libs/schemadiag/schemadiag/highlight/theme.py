"""Highlighting themes: token category -> display color.

Themes are small YAML documents validated against :data:`THEME_SCHEMA`::

    version: "1.0"
    categories:
      keyword: [255, 50, 50]
      property: [50, 150, 50]
      type: [120, 150, 50]
      punctuation.bracket: null   # default terminal color
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import jsonschema
import yaml

from schemadiag.diagnostics.errors import ClassifierConfigurationError

Color = tuple[int, int, int]
Theme = dict[str, "Color | None"]

CATEGORIES: tuple[str, ...] = (
    "punctuation.bracket",
    "keyword",
    "property",
    "type",
    "comment",
    "string",
)

DEFAULT_THEME: Theme = {
    "punctuation.bracket": None,
    "keyword": (255, 50, 50),
    "property": (50, 150, 50),
    "type": (120, 150, 50),
}

_RGB = {
    "oneOf": [
        {"type": "null"},
        {
            "type": "array",
            "items": {"type": "integer", "minimum": 0, "maximum": 255},
            "minItems": 3,
            "maxItems": 3,
        },
    ]
}

THEME_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["categories"],
    "additionalProperties": False,
    "properties": {
        "version": {"type": "string", "pattern": r"^\d+\.\d+$"},
        "categories": {
            "type": "object",
            "minProperties": 1,
            "additionalProperties": False,
            "properties": {name: _RGB for name in CATEGORIES},
        },
    },
}


def validate_theme(data: object) -> Theme:
    """Validate a decoded theme document and return the category mapping."""
    try:
        jsonschema.validate(instance=data, schema=THEME_SCHEMA)
    except jsonschema.ValidationError as e:
        where = " -> ".join(str(p) for p in e.path)
        detail = f"{e.message} (at {where})" if where else e.message
        raise ClassifierConfigurationError(f"invalid theme: {detail}") from e
    except jsonschema.SchemaError as e:
        raise ClassifierConfigurationError(f"invalid theme schema: {e.message}") from e

    categories = data["categories"]  # type: ignore[index]
    return {name: None if rgb is None else tuple(rgb) for name, rgb in categories.items()}


def load_theme(source: str | Path) -> Theme:
    """Load a theme from a YAML file path or from YAML text.

    A :class:`~pathlib.Path` is read from disk; a string is the YAML text itself.
    """
    if isinstance(source, Path):
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise ClassifierConfigurationError(f"cannot read theme {source}: {e}") from e
    else:
        text = source

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ClassifierConfigurationError(f"invalid YAML in theme: {e}") from e
    return validate_theme(data)


def coerce_theme(theme: Mapping[str, object] | str | Path | None) -> Theme:
    """Accept any supported theme spelling and return a validated Theme."""
    if theme is None:
        return dict(DEFAULT_THEME)
    if isinstance(theme, (str, Path)):
        return load_theme(theme)
    return validate_theme(
        {"categories": {k: list(v) if isinstance(v, (tuple, list)) else v for k, v in theme.items()}}
    )
