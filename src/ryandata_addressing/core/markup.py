"""HTML helpers used when rendering addresses.

Field values are escaped for markup output and stripped of markup for text
output.
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping, Sequence

_TAG_PATTERN = re.compile(r"<[^<>]*>")
_ANGLE_BRACKETS = re.compile(r"[<>]")


def escape(value: str) -> str:
    """Escape ``& < > " '`` so the value renders literally."""
    return html.escape(value, quote=True)


def strip_tags(value: str) -> str:
    """Remove markup from a value.

    Complete tags are removed first; any stray angle bracket left behind
    (``"a < b"``) is dropped as well, so the result never contains ``<`` or
    ``>``.
    """
    return _ANGLE_BRACKETS.sub("", _TAG_PATTERN.sub("", value))


def render_attributes(attributes: Mapping[str, str | Sequence[str]]) -> str:
    """Render a mapping as HTML attributes.

    List values are joined with spaces: ``{"class": ["a", "b"]}`` renders as
    ``class="a b"``.
    """
    rendered: list[str] = []
    for name, value in attributes.items():
        if not isinstance(value, str):
            value = " ".join(value)
        rendered.append(f'{escape(name)}="{escape(value)}"')
    return " ".join(rendered)


def wrap(value: str, tag: str, attributes: Mapping[str, str | Sequence[str]] | None = None) -> str:
    """Wrap a value in an element. The value is expected to be escaped already."""
    rendered = render_attributes(attributes or {})
    opening = f"<{tag} {rendered}>" if rendered else f"<{tag}>"
    return f"{opening}{value}</{tag}>"
