"""
Sample domain for the test suite: a Dog and the FakeDog that stands in for it.
"""
import random
from enum import Enum
from typing import List, Optional

from poseur import Fake, Operation


class DogFood(Enum):
    KIBBLE = "kibble"
    CANNED = "canned"
    SCRAPS = "scraps"

    @property
    def digested(self) -> str:
        return "Sick puppy." if self is DogFood.SCRAPS else "Poop."


class FetchableItem(Enum):
    BALL = "ball"
    SLIPPERS = "slippers"


class FamilyMember(Enum):
    PARENT = "parent"
    KID = "kid"


class Dog:
    BARKS = ["woof!", "bork!", "yip!"]

    def __init__(self):
        self.stomach: List[DogFood] = []
        self.should_poop = False

    def bark(self) -> str:
        return random.choice(self.BARKS)

    def feed(self, food: DogFood) -> None:
        self.stomach.append(food)

    def digest(self) -> Optional[str]:
        if self.should_poop and self.stomach:
            return self.stomach.pop(0).digested
        self.should_poop = not self.should_poop
        return None

    def roll_over(self, get_a_rub: bool) -> str:
        return "Panting sounds..." if get_a_rub else "Whimpering"

    def should_fetch(self, item: FetchableItem, family_member: FamilyMember) -> bool:
        return not (item is FetchableItem.SLIPPERS and family_member is FamilyMember.KID)


class FakeDog(Fake, Dog):
    class Function(Operation):
        BARK = "bark"
        FEED = "feed"
        DIGEST = "digest"
        ROLL_OVER = "roll_over"
        SHOULD_FETCH = "should_fetch"

    operation_type = Function

    def bark(self) -> str:
        return self.record_and_stub_here(as_type=str)

    def feed(self, food: DogFood) -> None:
        self.record_call(self.Function.FEED, food)

    def digest(self) -> Optional[str]:
        return self.record_and_stub(self.Function.DIGEST, as_type=Optional[str])

    def roll_over(self, get_a_rub: bool) -> str:
        return self.record_and_stub(self.Function.ROLL_OVER, get_a_rub, as_type=str)

    def should_fetch(self, item: FetchableItem, family_member: FamilyMember) -> bool:
        return self.record_and_stub(self.Function.SHOULD_FETCH, item, family_member, as_type=bool)

    def sit(self) -> str:
        # not declared in Function; used to exercise name lookup failures
        return self.record_and_stub_here(as_type=str)
