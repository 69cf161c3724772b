# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, SearchSpaceTooLargeError
from .lengths import check_length
from .pieces import Piece
from .rods import RodSpec

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "SearchSpaceTooLargeError",
    # validation
    "check_length",
    # core models
    "Piece",
    "RodSpec",
]
