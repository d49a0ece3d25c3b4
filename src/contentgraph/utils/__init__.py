"""
Utility functions for contentgraph.

This module contains low-level helpers used across the system.
No registry logic should live here.
"""

from contentgraph.utils.ids import content_id, is_zero_identifier
from contentgraph.utils.time import unix_timestamp
from contentgraph.utils.helpers import safe_mean, safe_max

__all__ = [
    "content_id",
    "is_zero_identifier",
    "unix_timestamp",
    "safe_mean",
    "safe_max",
]
