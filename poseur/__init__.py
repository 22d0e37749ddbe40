from poseur.core.config import FakerSettings, NumericMatchPolicy, configure_logging, settings
from poseur.core.exceptions.base import (
    ArgumentAccessError,
    ArgumentCountMismatchError,
    FakeConfigurationError,
    FakeUsageError,
    NoStubFoundError,
    PoseurBaseException,
    StubAlreadyConfiguredError,
    StubTypeMismatchError,
    UnknownOperationError,
)
from poseur.engine.argument_matcher import (
    ArgumentMatcher,
    EquatableMixin,
    SelfEquating,
    matcher_check,
    register_equatable,
)
from poseur.engine.call_ledger import CallLedger
from poseur.engine.faker import Faker
from poseur.engine.operation import Operation
from poseur.engine.stub_builder import StubBuilder
from poseur.engine.stub_table import StubTable
from poseur.fake import Fake
from poseur.helpers import argument

__all__ = [
    "ArgumentAccessError",
    "ArgumentCountMismatchError",
    "ArgumentMatcher",
    "CallLedger",
    "EquatableMixin",
    "Fake",
    "FakeConfigurationError",
    "FakeUsageError",
    "Faker",
    "FakerSettings",
    "NoStubFoundError",
    "NumericMatchPolicy",
    "Operation",
    "PoseurBaseException",
    "SelfEquating",
    "StubAlreadyConfiguredError",
    "StubBuilder",
    "StubTable",
    "StubTypeMismatchError",
    "UnknownOperationError",
    "argument",
    "configure_logging",
    "matcher_check",
    "register_equatable",
    "settings",
]
