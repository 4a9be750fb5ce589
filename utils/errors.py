"""
Prep Engine Errors

Typed errors raised by the engine. Every error carries a message and an
optional suggestion so request handlers can return it as structured data.
"""


class PrepEngineError(Exception):
    """Base class for errors raised by the prep engine."""

    status_code = 400

    def __init__(self, message, suggestion=None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def to_dict(self):
        data = {'error': self.message}
        if self.suggestion:
            data['suggestion'] = self.suggestion
        return data


class ValidationError(PrepEngineError):
    """Raised when required input is missing or invalid."""
    pass


class ConversionError(PrepEngineError):
    """Raised when a quantity cannot be converted between two units."""
    pass


class NotFoundError(PrepEngineError):
    """Raised when a referenced recipe, menu or ingredient is absent."""

    status_code = 404


class CalculationError(PrepEngineError, ArithmeticError):
    """Raised for non-positive servings or quantities that would divide by zero."""
    pass
