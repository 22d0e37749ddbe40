import logging
from typing import Any, Hashable, List, Optional, Sequence

from poseur.core.config import shorten
from poseur.engine.argument_matcher import ArgsCheck
from poseur.engine.models import RecordedCall

logger = logging.getLogger(__name__)


class CallLedger:
    """Append-only record of (operation, arguments) in call order."""

    def __init__(self, log_calls: bool = False, repr_width: Optional[int] = None) -> None:
        self._calls: List[RecordedCall] = []
        self._log_calls = log_calls
        self._repr_width = repr_width

    def record(self, operation: Hashable, arguments: Sequence[Any] = ()) -> None:
        call = RecordedCall(operation=operation, arguments=tuple(arguments))
        self._calls.append(call)
        if self._log_calls:
            logger.debug(f"Recorded call #{len(self._calls)}: {operation!s}{shorten(call.arguments, self._repr_width)}")

    def count_matching(self, operation: Hashable, predicate: Optional[ArgsCheck] = None) -> int:
        return sum(
            1
            for call in self._calls
            if call.operation == operation and (predicate is None or predicate(call.arguments))
        )

    def has_matching(self, operation: Hashable, predicate: Optional[ArgsCheck] = None) -> bool:
        return self.count_matching(operation, predicate) > 0

    def remove(self, operation: Hashable) -> None:
        self._calls = [call for call in self._calls if call.operation != operation]

    def clear(self) -> None:
        self._calls.clear()

    def __len__(self) -> int:
        return len(self._calls)
