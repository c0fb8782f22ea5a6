from __future__ import annotations

from typing import Callable, Optional

Morphism = Callable[[list], list]


def identity(obj: list) -> list:
    return list(obj)


def compose(first: Morphism, second: Morphism) -> Morphism:
    ## apply `first`, then `second`
    return lambda x: second(first(x))


class OpenSets:
    """
    Open sets generated from a basis of subsets. 

    Open sets start out as the basis itself; further open sets are made 
    as unions of basis elements. Morphisms between open sets are the 
    inclusion maps. 
    """
    def __init__(self, basis: list[list]):
        self.basis = [list(b) for b in basis]
        self.opensets = [list(b) for b in basis]

    def __len__(self):
        return len(self.opensets)

    def make_openset_from_basis(self, union_idx: list[int]) -> list:
        union = []
        for idx in union_idx:
            if idx < 0 or idx >= len(self.basis):
                raise IndexError(f"basis index out of range: {idx}")
            union.extend(self.basis[idx])

        self.opensets.append(union)
        return union

    def inclusion(self, source: list, target: list) -> Optional[Morphism]:
        if not all(item in target for item in source):
            return None

        target = list(target)
        return lambda _x: list(target)
