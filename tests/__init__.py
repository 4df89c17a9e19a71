"""
Test suite for Discriminant Calculator

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end console runs
"""
