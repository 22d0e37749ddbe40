import inspect
import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

from poseur.core.exceptions.base import NoStubFoundError
from poseur.engine.argument_matcher import ArgsCheck
from poseur.engine.models import Stub

logger = logging.getLogger(__name__)


class StubTable:
    """
    Configured behaviours per operation.

    Universal stubs (no guard) are kept one per operation and always win.
    Conditional stubs accumulate in registration order and are only
    consulted when no universal stub exists; the first whose guard accepts
    the arguments is used.
    """

    def __init__(self) -> None:
        self._universal: Dict[Hashable, Stub] = {}
        self._conditional: Dict[Hashable, List[Stub]] = {}

    def register_universal(self, operation: Hashable, action: Callable[..., Any]) -> None:
        if operation in self._universal:
            logger.debug(f"Replacing universal stub for {operation!s}")
        self._universal[operation] = Stub(operation=operation, action=action)

    def register_conditional(
        self, operation: Hashable, guard: Optional[ArgsCheck], action: Callable[..., Any]
    ) -> None:
        stub = Stub(operation=operation, guard=guard, action=action)
        self._conditional.setdefault(operation, []).append(stub)

    def find(self, operation: Hashable, arguments: Sequence[Any]) -> Optional[Stub]:
        universal = self._universal.get(operation)
        if universal is not None:
            return universal
        for stub in self._conditional.get(operation, []):
            if stub.accepts(arguments):
                return stub
        return None

    def resolve(self, operation: Hashable, arguments: Sequence[Any] = ()) -> Any:
        stub = self.find(operation, arguments)
        if stub is None:
            logger.warning(f"No stubs found for {operation!s}")
            raise NoStubFoundError(operation)
        return _run(stub.action, arguments)

    def has_stub(self, operation: Hashable) -> bool:
        return operation in self._universal or bool(self._conditional.get(operation))

    def remove_universal(self, operation: Hashable) -> None:
        self._universal.pop(operation, None)

    def remove_conditional(self, operation: Hashable) -> None:
        self._conditional.pop(operation, None)

    def remove_all(self, operation: Hashable) -> None:
        self.remove_universal(operation)
        self.remove_conditional(operation)

    def clear(self) -> None:
        self._universal.clear()
        self._conditional.clear()


def _run(action: Callable[..., Any], arguments: Sequence[Any]) -> Any:
    if _takes_arguments(action):
        return action(*arguments)
    return action()


def _takes_arguments(action: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(action).parameters.values()
    except (TypeError, ValueError):
        # builtins without an introspectable signature
        return True
    return any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL) for p in params
    )
