"""
Core value types, scalar primitives, and complex elementary functions.

This module has no dependencies on external data sources or I/O.
"""
