from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from fractions import Fraction
from pathlib import Path, PurePosixPath
from uuid import UUID

import pytest

from poseur import ArgumentCountMismatchError, EquatableMixin, NumericMatchPolicy
from poseur.engine.argument_matcher import ArgumentMatcher, matcher_check, register_equatable
from utils import DogFood


# -------- tiny domain types local to the test module --------

class _Collar:
    def __init__(self, color):
        self.color = color


class _Tag:
    """Compares case-insensitively through is_equal_to()."""

    def __init__(self, name):
        self.name = name

    def is_equal_to(self, other):
        return isinstance(other, _Tag) and other.name.lower() == self.name.lower()


class _Leash(EquatableMixin):
    def __init__(self, length):
        self.length = length

    def __eq__(self, other):
        return isinstance(other, _Leash) and other.length == self.length

    __hash__ = object.__hash__


@dataclass
class _Bowl:
    size: int


@dataclass(frozen=True)
class _Kennel:
    size: int


@register_equatable
@dataclass
class _Treat:
    flavor: str


class _Opaque:
    def __init__(self, secret):
        self.secret = secret

    def __repr__(self):
        return "opaque"


# -------------------- grouped tests --------------------

class TestOptionality:
    def test_none_matches_none(self):
        assert ArgumentMatcher(None).matches(None)

    @pytest.mark.parametrize("actual", [0, "", False, [], "None"])
    def test_none_never_matches_present_value(self, actual):
        assert not ArgumentMatcher(None).matches(actual)

    @pytest.mark.parametrize("expected", [0, "", False, "None"])
    def test_present_value_never_matches_none(self, expected):
        assert not ArgumentMatcher(expected).matches(None)


class TestTypeMismatch:
    def test_int_does_not_match_bool(self):
        assert not ArgumentMatcher(1).matches(True)
        assert not ArgumentMatcher(True).matches(1)

    def test_int_does_not_match_float_under_strict_policy(self):
        assert not ArgumentMatcher(1, NumericMatchPolicy.STRICT).matches(1.0)

    def test_int_matches_float_under_tower_policy(self):
        matcher = ArgumentMatcher(1, NumericMatchPolicy.TOWER)
        assert matcher.matches(1.0)
        assert not matcher.matches(1.5)

    def test_tower_policy_keeps_bool_apart(self):
        assert not ArgumentMatcher(1, NumericMatchPolicy.TOWER).matches(True)
        assert not ArgumentMatcher(0.0, NumericMatchPolicy.TOWER).matches(False)

    def test_string_does_not_match_its_number(self):
        assert not ArgumentMatcher("1").matches(1)

    def test_subclass_instance_is_a_different_type(self):
        class _Cone(_Collar):
            pass

        collar = _Cone("red")
        assert not ArgumentMatcher(_Collar("red")).matches(collar)


class TestSelfDescribingEquality:
    @pytest.mark.parametrize(
        "expected, actual, result",
        [
            (1, 1, True),
            (1, 2, False),
            (2.5, 2.5, True),
            ("canned", "canned", True),
            ("canned", "kibble", False),
            (b"x", b"x", True),
            (Decimal("1.10"), Decimal("1.1"), True),
            (DogFood.CANNED, DogFood.CANNED, True),
            (DogFood.CANNED, DogFood.KIBBLE, False),
            (datetime(2024, 1, 1), datetime(2024, 1, 1), True),
            (datetime(2024, 1, 1), datetime(2024, 1, 2), False),
            (date(2024, 1, 1), date(2024, 1, 1), True),
            (timedelta(seconds=5), timedelta(seconds=5), True),
            (UUID(int=1), UUID(int=1), True),
            (UUID(int=1), UUID(int=2), False),
            (Path("a"), Path("a"), True),
            (PurePosixPath("a"), PurePosixPath("b"), False),
            (Fraction(1, 3), Fraction(2, 6), True),
            (_Kennel(2), _Kennel(2), True),
            (_Kennel(2), _Kennel(3), False),
        ],
    )
    def test_builtin_value_types_use_equality(self, expected, actual, result):
        assert ArgumentMatcher(expected).matches(actual) is result

    def test_is_equal_to_decides(self):
        assert ArgumentMatcher(_Tag("Rex")).matches(_Tag("REX"))
        assert not ArgumentMatcher(_Tag("Rex")).matches(_Tag("Fido"))

    def test_equatable_mixin_uses_eq(self):
        assert ArgumentMatcher(_Leash(2)).matches(_Leash(2))
        assert not ArgumentMatcher(_Leash(2)).matches(_Leash(3))

    def test_registered_type_uses_eq(self):
        assert ArgumentMatcher(_Treat("bacon")).matches(_Treat("bacon"))
        assert not ArgumentMatcher(_Treat("bacon")).matches(_Treat("cheese"))


class TestIdentityFallback:
    def test_same_instance_matches(self):
        collar = _Collar("red")
        assert ArgumentMatcher(collar).matches(collar)

    def test_equal_looking_instances_do_not_match(self):
        assert not ArgumentMatcher(_Collar("red")).matches(_Collar("red"))

    def test_unregistered_dataclass_falls_back_to_identity(self):
        bowl = _Bowl(3)
        assert ArgumentMatcher(bowl).matches(bowl)
        assert not ArgumentMatcher(_Bowl(3)).matches(_Bowl(3))


class TestStringFallback:
    def test_lists_of_primitives_compare_by_text(self):
        assert ArgumentMatcher([1, 2]).matches([1, 2])
        assert not ArgumentMatcher([1, 2]).matches([1, 3])

    def test_dicts_compare_by_text(self):
        assert ArgumentMatcher({"a": 1}).matches({"a": 1})
        assert not ArgumentMatcher({"a": 1}).matches({"a": 2})

    def test_known_imprecision_for_values_hiding_state(self):
        # both lists render as "[opaque]"
        assert ArgumentMatcher([_Opaque(1)]).matches([_Opaque(2)])


class TestMatcherCheck:
    def test_all_positions_must_match(self):
        check = matcher_check([DogFood.CANNED, 2])
        assert check((DogFood.CANNED, 2))
        assert not check((DogFood.CANNED, 3))
        assert not check((DogFood.KIBBLE, 2))

    def test_empty_expectation_matches_empty_call(self):
        assert matcher_check([])(())

    def test_length_mismatch_raises(self):
        check = matcher_check([1, 2])
        with pytest.raises(ArgumentCountMismatchError) as exc_info:
            check((1,))
        assert exc_info.value.expected == 2
        assert exc_info.value.received == 1
