from typing import TypeVar, Iterable, Optional

from balanced_tree.balance_policy import NoBalancing
from balanced_tree.search_tree import SearchTree

T = TypeVar('T')


class BinarySearchTree(SearchTree[T]):
    def __init__(self, keys: Optional[Iterable[T]] = None) -> None:
        super().__init__(keys, policy=NoBalancing())
