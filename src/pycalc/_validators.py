# -*- coding: utf-8 -*-
"""
This module contains validator functions for the calculator inputs.
"""
import datetime as dt

from ._exceptions import InvalidMethodError
from ._enums import RepaymentMethod

def validate_positive_numeric(value, name):
    """Validate that a value is a non-negative number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Variable {name} can only be of type integer or float, both non-negative.")
    if value < 0:
        raise ValueError(f"Variable {name} can only be non-negative.")

def validate_strictly_positive_numeric(value, name):
    """Validate that a value is a number greater than zero."""
    validate_positive_numeric(value, name)
    if value == 0:
        raise ValueError(f"Variable {name} must be greater than 0.")

def validate_positive_integer(value, name):
    """Validate that a value is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Variable {name} can only be of type integer.")
    if value < 1:
        raise ValueError(f"Variable {name} can only be integers greater or equal to 1.")

def validate_date_string(value, name):
    """Validate that a value is a date string in YYYY-MM-DD format."""
    if not isinstance(value, str):
        raise TypeError(f"Variable {name} must be of type date with format YYYY-MM-DD")
    try:
        dt.datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        raise ValueError(f"Variable {name} must be a valid date in YYYY-MM-DD format.")

def validate_date(value, name):
    """Validate that a value is a date, a datetime or a date string in YYYY-MM-DD format."""
    if isinstance(value, dt.date):
        return
    validate_date_string(value, name)

def validate_boolean(value, name):
    """Validate that a value is a boolean."""
    if not isinstance(value, bool):
        raise TypeError(f"Variable {name} can only be of type boolean (either True or False)")

def validate_choice(value, enum_cls, name):
    """Validate that a value is a member, or the value of a member, of an enumeration."""
    try:
        enum_cls(value)
    except ValueError:
        valid_values = [str(item.value) for item in enum_cls]
        raise ValueError(f"Attribute {name} must be set to one of the following: {', '.join(valid_values)}.")

def validate_repayment_method(value, name):
    """Validate that a value is a supported repayment method."""
    try:
        RepaymentMethod(value)
    except ValueError:
        valid_methods = [item.value for item in RepaymentMethod]
        raise InvalidMethodError(f"Attribute {name} must be set to one of the following: {', '.join(valid_methods)}.")

def validate_non_negative_integer(value, name):
    """Validate that a value is an integer greater or equal to 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Variable {name} can only be of type integer.")
    if value < 0:
        raise ValueError(f"Variable {name} can only be integers greater or equal to 0.")
