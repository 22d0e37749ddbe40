from typing import Any, Optional, Sequence

from poseur.core.exceptions.base import ArgumentAccessError
from poseur.engine.faker import conforms_to


def argument(arguments: Sequence[Any], index: int, of_type: Any = None) -> Any:
    """
    Fetch one argument from a recorded argument list.

    Guards passed as ``where=`` receive the argument tuple and can hand it
    over directly. ``and_do`` actions receive the arguments unpacked, so an
    action that wants this helper collects them first:

        fake.stub(op).and_do(lambda *args: argument(args, 0, str).upper())

    :param arguments: the argument tuple the guard or action received.
    :param index: position of the argument. Negative indexes are rejected.
    :param of_type: optional expected type, checked the same way stubbed
        values are checked.
    :raises ArgumentAccessError: if the index is out of range or the argument
        is not of the expected type.
    """
    if not 0 <= index < len(arguments):
        raise ArgumentAccessError(index, arguments)
    value = arguments[index]
    if of_type is not None and not conforms_to(value, of_type):
        raise ArgumentAccessError(index, arguments, of_type)
    return value
