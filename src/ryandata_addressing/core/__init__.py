"""Core utilities shared by formatters and repositories.

Usage:
    from ryandata_addressing.core import (
        PluginFactory,
        parse_format_string,
        render_line,
        escape,
        strip_tags,
        render_attributes,
    )
"""

from __future__ import annotations

from ryandata_addressing.core.factory import PluginFactory
from ryandata_addressing.core.markup import escape, render_attributes, strip_tags, wrap
from ryandata_addressing.core.template import (
    COUNTRY_FIELD,
    FormatLine,
    Segment,
    parse_format_string,
    render_line,
    used_fields,
)

__all__ = [
    # Factory
    "PluginFactory",
    # Templates
    "COUNTRY_FIELD",
    "FormatLine",
    "Segment",
    "parse_format_string",
    "render_line",
    "used_fields",
    # Markup
    "escape",
    "render_attributes",
    "strip_tags",
    "wrap",
]
