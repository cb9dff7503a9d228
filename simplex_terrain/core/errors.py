# ========================
# file: simplex_terrain/core/errors.py
# ========================
class NoiseError(Exception):
    """Base error for the noise/field pipeline."""


class InvalidInputError(NoiseError, ValueError):
    """Raised when an operation receives arguments it cannot work with."""


class DegenerateRangeError(NoiseError, ArithmeticError):
    """Raised when a field has zero value range and cannot be rescaled."""


class PresetError(NoiseError):
    """Base error for the preset layer."""


class PresetValidationError(PresetError):
    """Raised when a preset fails validation."""
