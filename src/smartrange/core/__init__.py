"""Core range algorithm: granularity comparison and token splicing.

Exports:
    find_best_match: Finest calendar level two instants share
    splice: Compose the range string from two token sequences

Python 3.13+.
"""

from .comparator import find_best_match
from .splicer import splice

__all__ = ["find_best_match", "splice"]
