from typing import TypeVar, Iterable, Optional

from balanced_tree.balance_policy import AVLBalancing
from balanced_tree.search_tree import SearchTree

T = TypeVar('T')


class AVLTree(SearchTree[T]):
    """Height-balanced search tree: every node's subtrees differ in height by at most one."""

    def __init__(self, keys: Optional[Iterable[T]] = None) -> None:
        super().__init__(keys, policy=AVLBalancing())
