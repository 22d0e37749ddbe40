from enum import Enum
from typing import Type, TypeVar

from poseur.core.exceptions.base import UnknownOperationError

OperationT = TypeVar("OperationT", bound="Operation")


class Operation(str, Enum):
    """
    Closed set of the operations a fake exposes.

    Subclass it once per fake. The value is conventionally the name of the
    faked method, which is what record_and_stub_here() relies on:

        class Function(Operation):
            BARK = "bark"
            EAT = "eat"
    """

    # Members compare by identity, not as plain strings, so two fakes'
    # enums never collide even when their values are the same method name.
    def __eq__(self, other) -> bool:
        return self is other

    def __ne__(self, other) -> bool:
        return self is not other

    __hash__ = Enum.__hash__

    def __str__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def for_name(cls: Type[OperationT], name: str) -> OperationT:
        try:
            return cls(name)
        except ValueError:
            raise UnknownOperationError(name, cls) from None
