# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file (JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class SearchSpaceTooLargeError(ValueError):
    """Raised when rods ** pieces exceeds the configured enumeration limit."""
