"""
Test suite for product-pair

Contains:
- tests/unit/          : Unit tests for Pair, capabilities, free functions and laws
"""
