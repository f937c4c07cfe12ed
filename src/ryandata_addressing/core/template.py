"""Address format template parsing and line rendering.

Format strings are newline-separated lines containing field placeholders
(``%address_line1``) and literal text (separators such as ``", "`` or
``"-"``, or fixed markers such as ``"〒"``).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import lru_cache

_TOKEN_PATTERN = re.compile(r"%([a-z][a-z0-9_]*)")

# Literal text made only of whitespace and separator punctuation
_SEPARATOR_ONLY = re.compile(r"^[\s\-,./;:|]*$")
_WHITESPACE_RUN = re.compile(r"\s+")

COUNTRY_FIELD = "country"


@dataclass(frozen=True)
class Segment:
    """A single piece of a format line: either a field or literal text."""

    text: str
    field: str | None = None

    @property
    def is_field(self) -> bool:
        return self.field is not None


FormatLine = tuple[Segment, ...]


@lru_cache(maxsize=512)
def parse_format_string(format_string: str) -> tuple[FormatLine, ...]:
    """Parse a format string into lines of segments.

    ``%country`` is kept as the pseudo-field ``country``; other field names
    are not checked here.

    Args:
        format_string: Template such as ``"%address_line1\\n%locality, %postal_code"``.

    Returns:
        Tuple of lines, each a tuple of segments in template order.
    """
    lines: list[FormatLine] = []
    for raw_line in format_string.split("\n"):
        segments: list[Segment] = []
        position = 0
        for match in _TOKEN_PATTERN.finditer(raw_line):
            if match.start() > position:
                segments.append(Segment(text=raw_line[position : match.start()]))
            segments.append(Segment(text=match.group(0), field=match.group(1)))
            position = match.end()
        if position < len(raw_line):
            segments.append(Segment(text=raw_line[position:]))
        lines.append(tuple(segments))
    return tuple(lines)


def used_fields(format_string: str) -> list[str]:
    """Get the field names used by a format string, in template order."""
    seen: list[str] = []
    for line in parse_format_string(format_string):
        for segment in line:
            if segment.field and segment.field != COUNTRY_FIELD and segment.field not in seen:
                seen.append(segment.field)
    return seen


def _is_significant(literal: str) -> bool:
    return not _SEPARATOR_ONLY.match(literal)


def render_line(
    line: FormatLine,
    values: Mapping[str, str],
    render_literal: Callable[[str], str] = lambda text: text,
) -> str:
    """Render one format line, omitting empty fields and orphaned separators.

    Separators between two rendered fields are kept. When empty fields sit
    between two rendered fields the first separator containing punctuation
    wins, and whitespace runs inside it collapse to one space. A leading or
    trailing literal is kept only when it is more than punctuation and the
    field next to it was rendered.

    Args:
        line: Parsed format line.
        values: Rendered value per field name; missing or empty means omitted.
        render_literal: Transformation applied to kept literal text
            (escaping, for markup output).

    Returns:
        The rendered line, stripped of surrounding whitespace.
    """
    parts: list[str] = []
    pending: list[str] = []
    rendered_any = False
    previous_rendered = False
    seen_field = False
    last_index = len(line) - 1

    for index, segment in enumerate(line):
        if segment.field is None:
            if not seen_field:
                following = line[index + 1] if index < last_index else None
                if (
                    following is not None
                    and following.field is not None
                    and values.get(following.field)
                    and _is_significant(segment.text)
                ):
                    parts.append(render_literal(segment.text))
            elif index == last_index:
                if previous_rendered and _is_significant(segment.text):
                    parts.append(render_literal(segment.text))
            else:
                pending.append(segment.text)
            continue

        seen_field = True
        value = values.get(segment.field, "")
        if not value:
            previous_rendered = False
            continue

        if rendered_any and pending:
            separator = next((p for p in pending if p.strip()), pending[0])
            parts.append(render_literal(_WHITESPACE_RUN.sub(" ", separator)))
        pending = []
        parts.append(value)
        rendered_any = True
        previous_rendered = True

    return "".join(parts).strip()
