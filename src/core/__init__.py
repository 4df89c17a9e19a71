"""
Core domain models, discriminant math, configuration and logging.

This module contains the building blocks that are independent of the
console front-end (stdin/stdout handling lives in src.calculator).
"""
