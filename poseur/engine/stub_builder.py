from typing import Any, Callable, Hashable

from poseur.core.exceptions.base import StubAlreadyConfiguredError


class StubBuilder:
    """
    Returned by Faker.stub(); finish it with exactly one of
    and_return(), and_do() or and_raise().

    and_do() actions may take no parameters, or take the call's arguments
    positionally:

        fake.stub(Function.ROLL_OVER).and_do(lambda get_a_rub: "wag" if get_a_rub else "whine")
    """

    def __init__(self, operation: Hashable, register: Callable[[Callable[..., Any]], None]) -> None:
        self._operation = operation
        self._register = register
        self._action_added = False

    @property
    def action_added(self) -> bool:
        return self._action_added

    def and_do(self, action: Callable[..., Any]) -> None:
        if self._action_added:
            raise StubAlreadyConfiguredError(self._operation)
        self._action_added = True
        self._register(action)

    def and_return(self, value: Any) -> None:
        self.and_do(lambda: value)

    def and_raise(self, exc: BaseException) -> None:
        def _raise():
            raise exc

        self.and_do(_raise)
