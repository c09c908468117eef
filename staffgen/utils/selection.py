"""Uniform selection over ordered sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class UniformSource(Protocol):
    """Anything that draws floats uniformly from [0, 1).

    ``random.Random`` instances and the ``random`` module both qualify.
    """

    def random(self) -> float: ...


def pick(items: Sequence[T], rng: UniformSource) -> T:
    """Pick one element of ``items`` with probability 1/len(items).

    The index is ``floor(u * len(items))`` for one draw ``u``. ``items``
    must be non-empty; an empty sequence raises IndexError.
    """
    index = math.floor(rng.random() * len(items))
    return items[index]
