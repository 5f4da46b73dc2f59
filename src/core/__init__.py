"""
Core: Pair product type, type-class capabilities and curried free functions.

This module contains the foundational building blocks; it has no I/O,
no global mutable state and no external systems.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
