"""
Exception classes raised by fakes.

Every error here means the test itself is broken (a missing stub, a wrong
expectation, a misused builder). None of them are caught inside poseur.
"""
from typing import Any, Optional, Sequence

from poseur.core.config import shorten


class PoseurBaseException(Exception):
    """Base exception for all poseur exceptions"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class FakeConfigurationError(PoseurBaseException):
    """The fake was not configured for the way it is being used"""
    pass


class FakeUsageError(PoseurBaseException):
    """The poseur API itself was called incorrectly"""
    pass


class NoStubFoundError(FakeConfigurationError):
    """No universal stub and no matching conditional stub for an operation"""

    def __init__(self, operation: Any):
        self.operation = operation
        super().__init__(f"No stubs found for {operation!s}.")


class StubTypeMismatchError(FakeConfigurationError):
    """A stub produced a value of the wrong type"""

    def __init__(self, operation: Any, expected_type: Any, value: Any, repr_width: Optional[int] = None):
        self.operation = operation
        self.expected_type = expected_type
        self.value = value
        super().__init__(
            f"{operation!s} stubbed with the wrong type: expected {_type_name(expected_type)}, "
            f"got {type(value).__name__} ({shorten(value, repr_width)})."
        )


class ArgumentCountMismatchError(FakeConfigurationError):
    """Expected-argument list and recorded argument list differ in length"""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Wrong number of stubbed arguments. Expected {expected}. Received {received}."
        )


class StubAlreadyConfiguredError(FakeUsageError):
    """and_return/and_do/and_raise called more than once on one builder"""

    def __init__(self, operation: Any):
        self.operation = operation
        super().__init__(f"A callback has already been added for this stub of {operation!s}.")


class UnknownOperationError(FakeUsageError):
    """A method name does not correspond to any member of the operation enum"""

    def __init__(self, name: str, operation_type: Optional[type] = None):
        self.name = name
        self.operation_type = operation_type
        owner = operation_type.__name__ if operation_type is not None else "<undeclared>"
        super().__init__(f"Function name {name!r} did not match an existing member of {owner}.")


class ArgumentAccessError(FakeUsageError):
    """An argument was fetched from a recorded call at a bad index or with the wrong type"""

    def __init__(self, index: int, arguments: Sequence[Any], expected_type: Optional[type] = None):
        self.index = index
        self.arguments = tuple(arguments)
        self.expected_type = expected_type
        if expected_type is None or not 0 <= index < len(self.arguments):
            message = f"{index} is not a valid argument index in {shorten(self.arguments)}."
        else:
            actual = self.arguments[index]
            message = (
                f"Expected argument at index {index} to be of type {_type_name(expected_type)}, "
                f"but got {type(actual).__name__} instead. Either the recorded arguments in the fake "
                f"are incorrect or the expectations in the test are incorrect."
            )
        super().__init__(message)


def _type_name(tp: Any) -> str:
    if isinstance(tp, tuple):
        return " | ".join(_type_name(t) for t in tp)
    return getattr(tp, "__name__", None) or str(tp)
