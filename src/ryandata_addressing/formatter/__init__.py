"""Address formatters.

Usage:
    from ryandata_addressing.formatter import DefaultFormatter, FormatterFactory

    formatter = DefaultFormatter(options={"html": False})
    text = formatter.format(address)
"""

from __future__ import annotations

from ryandata_addressing.formatter.base import BaseFormatter
from ryandata_addressing.formatter.default import DefaultFormatter
from ryandata_addressing.formatter.factory import FormatterFactory
from ryandata_addressing.formatter.options import FormatterOptions, PostalLabelOptions
from ryandata_addressing.formatter.postal_label import PostalLabelFormatter

__all__ = [
    "BaseFormatter",
    "DefaultFormatter",
    "PostalLabelFormatter",
    "FormatterFactory",
    "FormatterOptions",
    "PostalLabelOptions",
]
