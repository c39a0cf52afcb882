"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of rational-engine:
the Rational value type, gcd strategies, the generic insertion sort and
JSON contracts. It is independent of the benchmark and CLI layers.
"""
