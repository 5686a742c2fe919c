"""Parsers for vehicle-routing instance files."""

from .instance import parse, read_instance

__all__ = [
    "parse",
    "read_instance"
]
