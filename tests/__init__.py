"""
Test suite for rational-engine

Contains:
- tests/unit/          : Unit tests for the Rational engine, sorting, contracts,
                         benchmark and CLI
"""
