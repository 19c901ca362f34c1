from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class Node(Generic[T]):
    def __init__(self, key: T, parent: Optional['Node[T]'] = None) -> None:
        self.key: T = key
        self.height: int = 1
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None
        self.parent: Optional['Node[T]'] = parent

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def detach(self) -> None:
        """Drop every link of a node that is no longer part of a tree."""
        self.left = None
        self.right = None
        self.parent = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, height={self.height})"


def create_node(key: T, parent: Optional[Node[T]] = None) -> Node[T]:
    return Node(key, parent)
