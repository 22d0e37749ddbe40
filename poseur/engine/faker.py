"""
The engine a fake delegates to: one CallLedger for spying plus one
StubTable for stubbing, keyed by Operation.

A Faker holds plain mutable state and takes no locks. It is meant for the
single thread of one test's arrange/act/assert cycle; driving one fake from
several threads or tasks at once is unsupported and needs external
synchronisation.
"""
import logging
import types
import typing
from typing import Any, Hashable, Optional, Sequence

from poseur.core.config import FakerSettings, settings
from poseur.core.exceptions.base import StubTypeMismatchError
from poseur.engine.argument_matcher import ArgsCheck, matcher_check
from poseur.engine.call_ledger import CallLedger
from poseur.engine.stub_builder import StubBuilder
from poseur.engine.stub_table import StubTable

logger = logging.getLogger(__name__)


class Faker:
    def __init__(self, faker_settings: Optional[FakerSettings] = None) -> None:
        self.settings = faker_settings or settings
        self.ledger = CallLedger(
            log_calls=self.settings.LOG_RECORDED_CALLS,
            repr_width=self.settings.MAX_ARGUMENT_REPR,
        )
        self.stubs = StubTable()

    # ---- reset ----

    def reset(self) -> None:
        self.ledger.clear()
        self.stubs.clear()
        logger.debug("Faker reset")

    def reset_operation(self, operation: Hashable) -> None:
        self.ledger.remove(operation)
        self.stubs.remove_all(operation)
        logger.debug(f"Faker reset for {operation!s}")

    # ---- spying ----

    def record(self, operation: Hashable, *arguments: Any) -> None:
        self.ledger.record(operation, arguments)

    def record_arguments(self, operation: Hashable, arguments: Sequence[Any]) -> None:
        """Same as record(), for arguments already collected in a sequence."""
        self.ledger.record(operation, arguments)

    def call_count_for(self, operation: Hashable, where: Optional[ArgsCheck] = None) -> int:
        return self.ledger.count_matching(operation, where)

    def call_count_for_arguments(self, operation: Hashable, *expected: Any) -> int:
        return self.ledger.count_matching(operation, matcher_check(expected, self.settings))

    def received(self, operation: Hashable, where: Optional[ArgsCheck] = None) -> bool:
        return self.ledger.has_matching(operation, where)

    def received_call(self, operation: Hashable, *expected: Any) -> bool:
        return self.call_count_for_arguments(operation, *expected) > 0

    # ---- stubbing ----

    def stub(self, operation: Hashable, where: Optional[ArgsCheck] = None) -> StubBuilder:
        if where is None:
            return StubBuilder(operation, lambda action: self.stubs.register_universal(operation, action))
        return StubBuilder(operation, lambda action: self.stubs.register_conditional(operation, where, action))

    def stub_with_arguments(self, operation: Hashable, *expected: Any) -> StubBuilder:
        return self.stub(operation, where=matcher_check(expected, self.settings))

    def stubbed_value(self, operation: Hashable, arguments: Sequence[Any] = (), as_type: Any = None) -> Any:
        value = self.stubs.resolve(operation, arguments)
        if as_type is not None and not conforms_to(value, as_type):
            logger.warning(f"{operation!s} stubbed with {type(value).__name__}, expected {as_type!r}")
            raise StubTypeMismatchError(operation, as_type, value, repr_width=self.settings.MAX_ARGUMENT_REPR)
        return value

    def record_and_stub(self, operation: Hashable, *arguments: Any, as_type: Any = None) -> Any:
        self.ledger.record(operation, arguments)
        return self.stubbed_value(operation, arguments, as_type=as_type)


def conforms_to(value: Any, as_type: Any) -> bool:
    """
    isinstance() that also understands Any, Optional/Union (including X | Y)
    and parameterised generics, which are checked against their origin only.
    """
    if as_type is Any or as_type is object:
        return True
    if as_type is None or as_type is type(None):
        return value is None
    if isinstance(as_type, tuple):
        return any(conforms_to(value, t) for t in as_type)

    origin = typing.get_origin(as_type)
    if origin is typing.Union or origin is types.UnionType:
        return any(conforms_to(value, t) for t in typing.get_args(as_type))
    if origin is typing.Literal:
        return value in typing.get_args(as_type)
    if origin is not None:
        return isinstance(value, origin)
    return isinstance(value, as_type)
