from trellis.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["validate", "validate_or_raise", "ValidationError"]
