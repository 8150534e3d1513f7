"""
Validation — Recursive schema validation.

Philosophy: a bad document is an expected outcome, not an exception.
- Valid instance → ValidationResult(status=valid)
- Invalid instance → ValidationResult(status=invalid) listing every violation
"""

from jsonguard.validation.validator import Validator, validate

__all__ = [
    "Validator",
    "validate",
]
