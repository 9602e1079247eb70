"""Visual styles for markers."""

from __future__ import annotations

from enum import Enum

from schemadiag.diagnostics.severity import Severity

# Caption text color, RGB.
CAPTION_COLOR = (127, 127, 255)


class Style(Enum):
    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value


_STYLES = {
    Severity.ERROR: Style.ERROR,
    Severity.WARNING: Style.WARNING,
}


def style_for(severity: Severity) -> Style:
    """Pick the marker style matching a part's severity."""
    return _STYLES[severity]
