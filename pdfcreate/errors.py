from typing import Any

from pydantic import ValidationError


class PDFCreateException(Exception):
    pass


class InvalidOptionError(PDFCreateException):
    "An option name that the operation does not know about"

    def __init__(self, operation: str, option: str) -> None:
        super().__init__(f"Invalid option for {operation}(): {option}")
        self.operation = operation
        self.option = option


class InvalidOptionValueError(PDFCreateException, ValueError):
    "A known option given a value outside of its allowed set"

    def __init__(self, operation: str, option: str, value: Any, reason: str = "") -> None:
        message = f"Invalid value for option {option} of {operation}(): {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.operation = operation
        self.option = option
        self.value = value


class FontMetricsLookupError(PDFCreateException, LookupError):
    pass


class ParameterCountError(PDFCreateException, TypeError):
    def __init__(self, operation: str, expected: int, got: int) -> None:
        super().__init__(
            f"{operation}() needs {expected} values, {got} given"
        )
        self.expected = expected
        self.got = got


class SerializationError(PDFCreateException):
    pass


class MissingPositionWarning(UserWarning):
    pass


def translate_validation_error(
    operation: str, error: ValidationError
) -> PDFCreateException:
    """
    Map the first error reported by pydantic onto this package's exceptions:
    unknown keys become InvalidOptionError, everything else InvalidOptionValueError.
    """
    first = error.errors()[0]
    option = ".".join(str(part) for part in first["loc"]) or "<root>"
    if first["type"] == "extra_forbidden":
        return InvalidOptionError(operation, option)
    return InvalidOptionValueError(
        operation, option, first.get("input"), first.get("msg", "")
    )
