# -*- coding: utf-8 -*-
"""
This module contains the exceptions raised by the pycalc package.
"""

class PycalcError(Exception):
    """Base class for errors raised by pycalc."""

class InvalidMethodError(PycalcError, ValueError):
    """Raised when a repayment method is not one of the supported methods."""

class DomainError(PycalcError, ValueError):
    """Raised when the inputs leave no month in which principal can be repaid."""
