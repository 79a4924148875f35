"""Shared utility functions for satbrowser.

Provides string collation helpers used for display-order sorting.
"""

from satbrowser.utils._collation import collation_key, compare_collated

__all__ = [
    "collation_key",
    "compare_collated",
]
