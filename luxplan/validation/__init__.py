"""
Luxplan Validation Module

Caller-side checks for calculation requests. The calculation core assumes
these preconditions and does not re-check them.
"""

from luxplan.validation.inputs import InputIssue, InvalidInputError, require_valid, validate_request

__all__ = ["InputIssue", "InvalidInputError", "require_valid", "validate_request"]
