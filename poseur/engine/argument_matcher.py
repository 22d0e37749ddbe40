"""
Matching of one expected argument against a recorded or incoming one.

ArgumentMatcher.matches() walks a fixed chain, each step short-circuiting:

  0. None only matches None.
  1. Different runtime types never match (True is not 1, 1 is not 1.0).
     NUMERIC_MATCH_POLICY=tower relaxes this for int/float only.
  2. A value that knows how to compare itself (SelfEquating, or one of the
     registered equatable types, which include the immutable stdlib values
     such as datetime, UUID and paths, and frozen dataclasses) decides for
     itself.
  3. Two instances of non-value types match only if they are the same object.
  4. Otherwise the str() of both values is compared.

Step 4 is a known-imprecise fallback. It is right for containers of
primitives (lists, tuples, dicts) and wrong for anything whose str() hides
state. Types that need exact semantics should implement is_equal_to() or be
passed to register_equatable().
"""
from __future__ import annotations

import dataclasses
import datetime
import fractions
import pathlib
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Sequence, Set, runtime_checkable

from poseur.core.config import FakerSettings, NumericMatchPolicy, settings
from poseur.core.exceptions.base import ArgumentCountMismatchError

ArgsCheck = Callable[[Sequence[Any]], bool]

# Compared with == out of the box.
_EQUATABLE_TYPES: Set[type] = {
    bool, int, float, complex, str, bytes, Decimal, fractions.Fraction, Enum,
    datetime.date, datetime.time, datetime.timedelta, datetime.timezone,
    uuid.UUID, pathlib.PurePath, range,
}

# Value types without a trusted == that still must not fall back to identity.
_CONTAINER_TYPES = (list, tuple, dict, set, frozenset)


@runtime_checkable
class SelfEquating(Protocol):
    def is_equal_to(self, other: Any) -> bool: ...


class EquatableMixin:
    """Default is_equal_to(): same type (or subclass) and ==."""

    def is_equal_to(self, other: Any) -> bool:
        if isinstance(other, type(self)):
            return other == self
        return False


def register_equatable(cls: type) -> type:
    """Opt a type into ==-based matching. Usable as a class decorator."""
    _EQUATABLE_TYPES.add(cls)
    return cls


def is_equatable(value: Any) -> bool:
    return isinstance(value, tuple(_EQUATABLE_TYPES)) or _is_frozen_dataclass(value)


def _is_frozen_dataclass(value: Any) -> bool:
    if not dataclasses.is_dataclass(value) or isinstance(value, type):
        return False
    params = type(value).__dataclass_params__
    return params.frozen and params.eq


def _is_value_type(value: Any) -> bool:
    return is_equatable(value) or isinstance(value, _CONTAINER_TYPES)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ArgumentMatcher:
    __slots__ = ("_expected", "_policy")

    def __init__(self, expected: Any, policy: Optional[NumericMatchPolicy] = None):
        self._expected = expected
        self._policy = policy or settings.NUMERIC_MATCH_POLICY

    @property
    def expected(self) -> Any:
        return self._expected

    def matches(self, actual: Any) -> bool:
        expected = self._expected

        if expected is None or actual is None:
            return expected is None and actual is None

        if type(expected) is not type(actual):
            if (
                self._policy == NumericMatchPolicy.TOWER
                and _is_number(expected)
                and _is_number(actual)
            ):
                return expected == actual
            return False

        if isinstance(expected, SelfEquating):
            return bool(expected.is_equal_to(actual))
        if is_equatable(expected):
            return expected == actual

        if not _is_value_type(expected) and not _is_value_type(actual):
            return expected is actual

        return str(expected) == str(actual)

    def __repr__(self) -> str:
        return f"ArgumentMatcher({self._expected!r})"


def matcher_check(expected: Sequence[Any], faker_settings: Optional[FakerSettings] = None) -> ArgsCheck:
    """
    Build an argument-list predicate from expected values, compared positionally.

    A call whose argument count differs from len(expected) raises
    ArgumentCountMismatchError instead of simply not matching.
    """
    policy = (faker_settings or settings).NUMERIC_MATCH_POLICY
    matchers: List[ArgumentMatcher] = [ArgumentMatcher(value, policy) for value in expected]

    def check(arguments: Sequence[Any]) -> bool:
        if len(arguments) != len(matchers):
            raise ArgumentCountMismatchError(expected=len(matchers), received=len(arguments))
        return all(matcher.matches(arg) for matcher, arg in zip(matchers, arguments))

    return check
