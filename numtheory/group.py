"""Finite groups of non-negative integers checked against the group axioms."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable

from numtheory.common import NumberTheoryError

MAX_CHECK_TIMES = 10
"""Number of random samples drawn when an axiom is checked by sampling."""


class OperationRule(enum.Enum):
    """The binary operation of a group."""

    ADDITION = 0
    MULTIPLICATION = 1
    MODULO = 2


class GroupKind(enum.Enum):
    """Broad classes of groups."""

    FINITE = 0
    INFINITE = 1
    ORDINARY = 2
    SUBGROUP = 3


class GroupError(NumberTheoryError, ValueError):
    """The given elements and operation do not form a group."""


class Group:
    """A set of non-negative integers with an operation, validated on creation.

    Associativity under the modular rule is checked on randomly sampled
    triples rather than on every triple.  Every element must have a
    multiplicative inverse modulo ``mod``, whatever the operation.
    """

    def __init__(
        self,
        elements: Iterable[int],
        op: OperationRule,
        mod: int = 5,
    ) -> None:
        self.elements: tuple[int, ...] = tuple(elements)
        self.op = OperationRule(op)
        if mod <= 0:
            raise GroupError(f"modulus must be positive, got {mod}")
        if any(e < 0 for e in self.elements):
            raise GroupError("group elements must be non-negative")
        self.mod = mod
        self.identity = 0

        if not self._elements_in_range():
            raise GroupError(f"every element must be below the modulus {mod}")
        if not self._is_closed():
            raise GroupError("the set is not closed under the operation")
        if not self._is_associative():
            raise GroupError("the operation is not associative on this set")
        if not self._find_identity():
            raise GroupError("the set has no identity element")
        if not self._has_inverses():
            raise GroupError("some element has no inverse")

    def __contains__(self, value: object) -> bool:
        return value in self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Group({list(self.elements)!r}, {self.op}, mod={self.mod})"

    def format(self) -> str:
        """Return a readable description of the elements and the identity."""
        if not self.elements:
            return "Empty group."
        listing = " ".join(str(e) for e in self.elements)
        return (
            "Element of current group:\n"
            f"{listing}\n"
            f"Group identity: {self.identity}"
        )

    def _elements_in_range(self) -> bool:
        if self.op is OperationRule.MODULO:
            return all(e < self.mod for e in self.elements)
        return True

    def _distinct_pairs(self):
        for i, a in enumerate(self.elements):
            for b in self.elements[i + 1 :]:
                yield a, b

    def _is_closed(self) -> bool:
        if self.op is OperationRule.ADDITION:
            return all(a + b in self for a, b in self._distinct_pairs())
        if self.op is OperationRule.MULTIPLICATION:
            return all(a * b in self for a, b in self._distinct_pairs())
        return all(e % self.mod in self for e in self.elements)

    def _is_associative(self) -> bool:
        if self.op is not OperationRule.MODULO or not self.elements:
            return True
        m = self.mod
        for _ in range(MAX_CHECK_TIMES):
            a, b, c = random.choices(self.elements, k=3)
            if (a * b % m) * c % m != a * (b * c % m) % m:
                return False
        return True

    def _find_identity(self) -> bool:
        if self.op is not OperationRule.MODULO:
            return True
        for candidate in self.elements:
            if all(candidate * x % self.mod == x for x in self.elements):
                self.identity = candidate
                return True
        return False

    def _has_inverses(self) -> bool:
        return all(
            any(a * b % self.mod == 1 for b in self.elements)
            for a in self.elements
        )