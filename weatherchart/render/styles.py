"""Text decoration for the two output formats.

Renderers call ``bold`` and ``cyan`` with the requested Format and never
branch on the format themselves; everything format specific lives in the
STYLES table.
"""

import html
import re
from collections.abc import Callable
from dataclasses import dataclass

from weatherchart.models.common import Format


@dataclass(frozen=True)
class Style:
    bold: tuple[str, str]
    cyan: tuple[str, str]
    document_open: str
    document_close: str
    escape: Callable[[str], str]


def _passthrough(text: str) -> str:
    return text


STYLES: dict[Format, Style] = {
    Format.TTY: Style(
        bold=("\x1b[1m", "\x1b[0m"),
        cyan=("\x1b[36m", "\x1b[0m"),
        document_open="\n",
        document_close="",
        escape=_passthrough,
    ),
    Format.HTML: Style(
        bold=("<strong>", "</strong>"),
        cyan=('<span style="color: teal">', "</span>"),
        document_open="<html><pre>",
        document_close="</pre></html>",
        escape=html.escape,
    ),
}

_DECORATION_RE = re.compile(
    r"\x1b\[[0-9;]*m|</?strong>|<span style=\"color: teal\">|</span>"
)


def bold(text: str, fmt: Format) -> str:
    start, end = STYLES[fmt].bold
    return f"{start}{text}{end}"


def cyan(text: str, fmt: Format) -> str:
    start, end = STYLES[fmt].cyan
    return f"{start}{text}{end}"


def escape(text: str, fmt: Format) -> str:
    """Escape payload text so it cannot inject markup into the document."""
    return STYLES[fmt].escape(text)


def strip_styles(text: str) -> str:
    """Remove every decoration ``bold`` and ``cyan`` can produce."""
    return _DECORATION_RE.sub("", text)
