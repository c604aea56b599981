"""Exception definitions for humaniser"""

from ..constants import ErrorCode


class HumaniserError(Exception):
    """Base exception for humaniser"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class InvalidInputError(HumaniserError, ValueError):
    """Input outside the domain a formatter accepts"""

    def __init__(self, message: str, value=None):
        super().__init__(message, ErrorCode.INVALID_INPUT)
        self.value = value


class ConfigError(HumaniserError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ValidationError(ConfigError):
    """Configuration does not match the schema"""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.error_code = ErrorCode.CONFIG_VALIDATION_FAILED
        self.errors = list(errors or [])
