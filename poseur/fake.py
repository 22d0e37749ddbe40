import inspect
from typing import Any, ClassVar, Optional, Type

from poseur.core.config import FakerSettings
from poseur.core.exceptions.base import UnknownOperationError
from poseur.engine.argument_matcher import ArgsCheck
from poseur.engine.faker import Faker
from poseur.engine.operation import Operation
from poseur.engine.stub_builder import StubBuilder


class Fake:
    """
    Base for hand-written fakes. Each overridden method forwards to the
    one Faker held in ``self.faker``:

        class FakeDog(Fake, Dog):
            class Function(Operation):
                BARK = "bark"
                EAT = "eat"

            operation_type = Function

            def bark(self) -> str:
                return self.record_and_stub(self.Function.BARK, as_type=str)

            def eat(self, food):
                self.record_call(self.Function.EAT, food)
    """

    operation_type: ClassVar[Optional[Type[Operation]]] = None

    def __init__(self, *args, faker_settings: Optional[FakerSettings] = None, **kwargs) -> None:
        # the real class may call overridden methods from its own __init__
        self.faker = Faker(faker_settings)
        super().__init__(*args, **kwargs)

    def reset(self) -> None:
        self.faker.reset()

    def reset_operation(self, operation: Operation) -> None:
        self.faker.reset_operation(operation)

    # ---- spying ----

    def record_call(self, operation: Operation, *arguments: Any) -> None:
        self.faker.record(operation, *arguments)

    def received(self, operation: Operation, where: Optional[ArgsCheck] = None) -> bool:
        return self.faker.received(operation, where)

    def received_call(self, operation: Operation, *expected: Any) -> bool:
        return self.faker.received_call(operation, *expected)

    def call_count_for(self, operation: Operation, where: Optional[ArgsCheck] = None) -> int:
        return self.faker.call_count_for(operation, where)

    def call_count_for_arguments(self, operation: Operation, *expected: Any) -> int:
        return self.faker.call_count_for_arguments(operation, *expected)

    # ---- stubbing ----

    def stub(self, operation: Operation, where: Optional[ArgsCheck] = None) -> StubBuilder:
        return self.faker.stub(operation, where)

    def stub_with_arguments(self, operation: Operation, *expected: Any) -> StubBuilder:
        return self.faker.stub_with_arguments(operation, *expected)

    def stubbed_value(self, operation: Operation, arguments=(), as_type: Any = None) -> Any:
        return self.faker.stubbed_value(operation, arguments, as_type=as_type)

    def record_and_stub(self, operation: Operation, *arguments: Any, as_type: Any = None) -> Any:
        return self.faker.record_and_stub(operation, *arguments, as_type=as_type)

    def record_and_stub_here(self, *arguments: Any, as_type: Any = None) -> Any:
        """record_and_stub() for the operation whose value is the calling method's name."""
        frame = inspect.currentframe()
        try:
            caller = frame.f_back.f_code.co_name
        finally:
            del frame
        return self.record_and_stub(self._operation_named(caller), *arguments, as_type=as_type)

    def _operation_named(self, name: str) -> Operation:
        operation_type = type(self).operation_type
        if operation_type is None:
            raise UnknownOperationError(name, None)
        return operation_type.for_name(name)
