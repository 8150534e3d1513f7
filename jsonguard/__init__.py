"""
jsonguard — Schema-driven JSON validation

A small, deterministic validator for the common JSON Schema subset:
types, required fields, nested properties, array items, enums,
string length/pattern, numeric range and array size.

Schemas compile once. Documents validate many times.
"""

__version__ = "0.1.0"
__report_version__ = "0.1.0"
