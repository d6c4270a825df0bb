"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: exact rational
arithmetic, bounded progressions, clock configuration and report contracts.
"""
