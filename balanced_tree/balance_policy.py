"""
Balancing policies for the search tree engine.

A policy is handed a node whose cached height has just been recomputed and
returns whichever node should occupy that position afterwards. The engine
links the returned node into the parent (or makes it the root).
"""

import logging
from typing import Dict, Type, Union, TYPE_CHECKING

from balanced_tree.node_store import Node

if TYPE_CHECKING:
    from balanced_tree.search_tree import SearchTree

logger = logging.getLogger(__name__)


class BalancePolicy:
    name = "base"

    def rebalance(self, tree: 'SearchTree', node: Node, key) -> Node:
        raise NotImplementedError

    def is_satisfied(self, tree: 'SearchTree', node: Node) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoBalancing(BalancePolicy):
    """Plain binary search tree: structure is left exactly as inserted."""

    name = "none"

    def rebalance(self, tree: 'SearchTree', node: Node, key) -> Node:
        return node

    def is_satisfied(self, tree: 'SearchTree', node: Node) -> bool:
        return True


class AVLBalancing(BalancePolicy):
    """
    AVL rotations.

    The case is picked from the balance factors of the node and of its heavy
    child, so the same split serves inserts and removes. ``key`` is the
    inserted key (or the ancestor's own key during a remove) and only shows
    up in the debug log.
    """

    name = "avl"

    def rebalance(self, tree: 'SearchTree', node: Node, key) -> Node:
        balance = tree.get_balance(node)

        if balance > 1:
            assert node.left is not None
            if tree.get_balance(node.left) < 0:
                logger.debug("LR rotation at %r (key=%r)", node.key, key)
                node.left = tree.rotate_left(node.left)
            else:
                logger.debug("LL rotation at %r (key=%r)", node.key, key)
            return tree.rotate_right(node)

        if balance < -1:
            assert node.right is not None
            if tree.get_balance(node.right) > 0:
                logger.debug("RL rotation at %r (key=%r)", node.key, key)
                node.right = tree.rotate_right(node.right)
            else:
                logger.debug("RR rotation at %r (key=%r)", node.key, key)
            return tree.rotate_left(node)

        return node

    def is_satisfied(self, tree: 'SearchTree', node: Node) -> bool:
        return abs(tree.get_balance(node)) <= 1


POLICIES: Dict[str, Type[BalancePolicy]] = {
    "none": NoBalancing,
    "bst": NoBalancing,
    "avl": AVLBalancing,
}


def make_policy(policy: Union[str, BalancePolicy]) -> BalancePolicy:
    """
    Resolve a policy name or instance.

    Args:
        policy: One of 'none', 'bst', 'avl', or a BalancePolicy instance

    Returns:
        BalancePolicy instance
    """
    if isinstance(policy, BalancePolicy):
        return policy
    if policy not in POLICIES:
        raise ValueError(f"Unknown balancing policy: {policy}")
    return POLICIES[policy]()
