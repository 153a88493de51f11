"""
Type definitions shared by the union-find modules.
"""

from collections.abc import Callable, Hashable
from typing import TypeVar

from typing_extensions import TypeAliasType

# Elements stored in the disjoint sets
Element = TypeVar("Element", bound=Hashable)
# Values identifying a set
RepresentativeValue = TypeVar("RepresentativeValue", bound=Hashable)

# Maps an element to the representative value of its initial set
E = TypeVar("E")
R = TypeVar("R")
RepresentativeOf = TypeAliasType("RepresentativeOf", Callable[[E], R], type_params=(E, R))
