"""
Search tree engine shared by the plain and the AVL binary search trees.

Nodes keep parent links, so inserts and removes both finish with the same
upward walk: recompute the cached height, let the balancing policy restore
its invariant, then continue from the parent of whatever node now holds
that position.
"""

import copy as _copy
import logging
from typing import TypeVar, Generic, Iterable, List, Iterator, Optional, Tuple, Union

from balanced_tree.balance_policy import BalancePolicy, make_policy
from balanced_tree.node_store import Node, create_node
from balanced_tree.tree_format import render_tree

T = TypeVar('T')

logger = logging.getLogger(__name__)


class SearchTree(Generic[T]):
    def __init__(
        self,
        keys: Optional[Iterable[T]] = None,
        policy: Union[str, BalancePolicy] = "avl",
    ) -> None:
        self._policy: BalancePolicy = make_policy(policy)
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        if keys is not None:
            self.extend(keys)

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    @property
    def policy(self) -> BalancePolicy:
        return self._policy

    def extend(self, keys: Iterable[T]) -> None:
        for key in keys:
            self.insert(key)

    # -- heights ---------------------------------------------------------

    def get_height(self, node: Optional[Node[T]]) -> int:
        if node is None:
            return 0
        return node.height

    def get_balance(self, node: Optional[Node[T]]) -> int:
        if node is None:
            return 0
        return self.get_height(node.left) - self.get_height(node.right)

    def update_height(self, node: Optional[Node[T]]) -> None:
        if node is None:
            return
        node.height = 1 + max(self.get_height(node.left), self.get_height(node.right))

    # -- structural primitives -------------------------------------------

    def rotate_left(self, z: Node[T]) -> Node[T]:
        """
        Lift z's right child above z and return it.

        The returned node takes over z's parent link, but the parent's child
        pointer is left to the caller.
        """
        y = z.right
        if y is None:
            raise ValueError(f"cannot rotate left at {z.key!r}: no right child")
        t2 = y.left

        z.right = t2
        if t2 is not None:
            t2.parent = z

        y.left = z
        y.parent = z.parent
        z.parent = y

        self.update_height(z)
        self.update_height(y)

        logger.debug("rotated left at %r, new subtree root %r", z.key, y.key)
        return y

    def rotate_right(self, z: Node[T]) -> Node[T]:
        """Mirror image of rotate_left."""
        y = z.left
        if y is None:
            raise ValueError(f"cannot rotate right at {z.key!r}: no left child")
        t3 = y.right

        z.left = t3
        if t3 is not None:
            t3.parent = z

        y.right = z
        y.parent = z.parent
        z.parent = y

        self.update_height(z)
        self.update_height(y)

        logger.debug("rotated right at %r, new subtree root %r", z.key, y.key)
        return y

    def transplant(self, u: Node[T], v: Optional[Node[T]]) -> None:
        """Put subtree v where subtree u hangs from its parent (or the root)."""
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v

        if v is not None:
            v.parent = u.parent

    def _rebalance_upward(self, node: Optional[Node[T]], key: Optional[T] = None) -> None:
        while node is not None:
            parent = node.parent
            was_left = node.is_left_child()

            self.update_height(node)
            ref_key = node.key if key is None else key
            replacement = self._policy.rebalance(self, node, ref_key)

            if replacement is not node:
                # rotations already set replacement.parent
                if parent is None:
                    self._root = replacement
                elif was_left:
                    parent.left = replacement
                else:
                    parent.right = replacement

            node = parent

    # -- mutation --------------------------------------------------------

    def insert(self, key: T) -> None:
        parent: Optional[Node[T]] = None
        node = self._root
        while node is not None:
            parent = node
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                logger.debug("insert of existing key %r ignored", key)
                return

        new_node = create_node(key, parent)
        if parent is None:
            self._root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1

        self._rebalance_upward(parent, key)

    def remove(self, key: T) -> None:
        node = self.search(key)
        if node is None:
            logger.debug("remove of absent key %r ignored", key)
            return

        start: Optional[Node[T]]
        if node.left is None and node.right is None:
            start = node.parent
            self.transplant(node, None)
        elif node.left is None:
            start = node.right
            self.transplant(node, node.right)
        elif node.right is None:
            start = node.left
            self.transplant(node, node.left)
        else:
            successor = self._minimum_node(node.right)
            if successor.parent is not node:
                start = successor.parent
                self.transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            else:
                start = successor
            self.transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor

        node.detach()
        self._size -= 1

        self._rebalance_upward(start)

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # -- queries ---------------------------------------------------------

    def search(self, key: T) -> Optional[Node[T]]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def contains(self, key: T) -> bool:
        return self.search(key) is not None

    def _minimum_node(self, node: Node[T]) -> Node[T]:
        while node.left is not None:
            node = node.left
        return node

    def _maximum_node(self, node: Node[T]) -> Node[T]:
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> Optional[Node[T]]:
        if self._root is None:
            return None
        return self._minimum_node(self._root)

    def maximum(self) -> Optional[Node[T]]:
        if self._root is None:
            return None
        return self._maximum_node(self._root)

    def min(self) -> T:
        node = self.minimum()
        if node is None:
            raise ValueError("min from empty tree")
        return node.key

    def max(self) -> T:
        node = self.maximum()
        if node is None:
            raise ValueError("max from empty tree")
        return node.key

    def successor(self, key: T) -> Optional[Node[T]]:
        """
        Node holding the smallest key greater than ``key``.

        Returns None when ``key`` is not in the tree or is the maximum.
        """
        node = self.search(key)
        if node is None:
            return None
        if node.right is not None:
            return self._minimum_node(node.right)

        parent = node.parent
        while parent is not None and parent.right is node:
            node = parent
            parent = parent.parent
        return parent

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        return self.get_height(self._root)

    # -- traversals ------------------------------------------------------

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def _nodes(self) -> Iterator[Node[T]]:
        if self._root is None:
            return
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    # -- diagnostics -----------------------------------------------------

    def copy(self) -> 'SearchTree[T]':
        clone = _copy.copy(self)
        clone.clear()
        clone.extend(self.pre_order())
        return clone

    def is_balanced(self) -> bool:
        """True when every node has a balance factor in [-1, 1]."""
        return all(abs(self.get_balance(node)) <= 1 for node in self._nodes())

    def is_valid(self) -> bool:
        """
        Check key order, parent links, cached heights and the policy's own
        invariant at every node.
        """
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False

        count = 0
        # (node, lower bound, upper bound); None means unbounded
        stack: List[Tuple[Node[T], Optional[T], Optional[T]]] = [(self._root, None, None)]
        while stack:
            node, low, high = stack.pop()
            count += 1
            if low is not None and not low < node.key:
                return False
            if high is not None and not node.key < high:
                return False
            expected = 1 + max(self.get_height(node.left), self.get_height(node.right))
            if node.height != expected:
                return False
            if not self._policy.is_satisfied(self, node):
                return False
            if node.left is not None:
                if node.left.parent is not node:
                    return False
                stack.append((node.left, low, node.key))
            if node.right is not None:
                if node.right.parent is not node:
                    return False
                stack.append((node.right, node.key, high))
        return count == self._size

    def render(self, prefix: str = "") -> str:
        return render_tree(self._root, prefix)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, height={self.height()})"
