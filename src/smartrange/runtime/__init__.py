"""smartrange runtime package.

Provides the rendering engines and the RangeFormatter API.
Depends on the pattern and core packages.

Python 3.13+.
"""

from .engine import BabelEngine, DateFormattingEngine
from .formatter import RangeFormatter, format_range

__all__ = [
    "BabelEngine",
    "DateFormattingEngine",
    "RangeFormatter",
    "format_range",
]
