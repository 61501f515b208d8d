"""
Allotment Utilities Package

Contains shared helpers used by the engine, the session and the CLI.
"""

from allotment.utils.decorators import singleton
from allotment.utils.formatting import format_compact_number, format_currency, format_percent

__all__ = [
    "singleton",
    "format_compact_number",
    "format_currency",
    "format_percent",
]
