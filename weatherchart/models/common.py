"""Common types shared across models."""

from enum import StrEnum


class Format(StrEnum):
    TTY = "tty"
    HTML = "html"


def format_for_accept(accept: str | None) -> Format:
    """Pick the output format from an Accept header.

    Browsers send ``text/html, application/xhtml+xml, ...``; curl sends
    nothing or ``*/*``.
    """
    if accept and "html" in accept:
        return Format.HTML
    return Format.TTY
