import unittest
import random

from balanced_tree.balance_policy import AVLBalancing, NoBalancing
from balanced_tree.search_tree import SearchTree


class TestSearchTreeConfiguration(unittest.TestCase):
    def test_default_policy_is_avl(self):
        tree = SearchTree()
        self.assertIsInstance(tree.policy, AVLBalancing)

    def test_policy_by_name(self):
        self.assertIsInstance(SearchTree(policy="none").policy, NoBalancing)
        self.assertIsInstance(SearchTree(policy="bst").policy, NoBalancing)
        self.assertIsInstance(SearchTree(policy="avl").policy, AVLBalancing)

    def test_policy_instance_is_used_as_is(self):
        policy = NoBalancing()
        tree = SearchTree(policy=policy)
        self.assertIs(tree.policy, policy)

    def test_unknown_policy_raises(self):
        with self.assertRaises(ValueError):
            SearchTree(policy="red-black")

    def test_same_keys_different_policies(self):
        keys = [1, 2, 3, 4, 5, 6, 7]
        plain = SearchTree(keys, policy="none")
        avl = SearchTree(keys, policy="avl")
        self.assertEqual(plain.height(), 7)
        self.assertEqual(avl.height(), 3)
        self.assertEqual(plain.in_order(), avl.in_order())

    def test_copy_keeps_policy(self):
        tree = SearchTree([3, 2, 1], policy="none")
        clone = tree.copy()
        self.assertIs(clone.policy, tree.policy)
        self.assertEqual(clone.pre_order(), [3, 2, 1])


class TestSearchTreeRotations(unittest.TestCase):
    def test_rotate_left_at_root(self):
        tree = SearchTree([10, 5, 20, 15, 30], policy="none")
        z = tree.root
        y = tree.rotate_left(z)

        self.assertEqual(y.key, 20)
        self.assertIsNone(y.parent)
        self.assertIs(y.left, z)
        self.assertIs(z.parent, y)
        self.assertEqual(z.right.key, 15)
        self.assertIs(z.right.parent, z)
        self.assertEqual(z.height, 2)
        self.assertEqual(y.height, 3)

    def test_rotate_right_keeps_grandparent_for_caller(self):
        tree = SearchTree([50, 30, 20, 40], policy="none")
        z = tree.search(30)
        y = tree.rotate_right(z)

        self.assertEqual(y.key, 20)
        self.assertIs(y.parent, tree.root)
        # the grandparent still points at z until the caller relinks it
        self.assertIs(tree.root.left, z)
        tree.root.left = y
        self.assertEqual(tree.in_order(), [20, 30, 40, 50])
        self.assertEqual(z.left, None)
        self.assertEqual(z.right.key, 40)

    def test_rotate_without_child_raises(self):
        tree = SearchTree([10], policy="none")
        with self.assertRaises(ValueError):
            tree.rotate_left(tree.root)
        with self.assertRaises(ValueError):
            tree.rotate_right(tree.root)


class TestSearchTreeTransplant(unittest.TestCase):
    def test_transplant_root(self):
        tree = SearchTree([10, 5], policy="none")
        child = tree.root.left
        tree.transplant(tree.root, child)
        self.assertIs(tree.root, child)
        self.assertIsNone(child.parent)

    def test_transplant_right_child_with_none(self):
        tree = SearchTree([10, 5, 15], policy="none")
        tree.transplant(tree.search(15), None)
        self.assertIsNone(tree.root.right)
        self.assertEqual(tree.root.left.key, 5)


class TestSearchTreeUpdateHeight(unittest.TestCase):
    def test_update_height_ignores_none(self):
        tree = SearchTree()
        tree.update_height(None)

    def test_update_height_recomputes(self):
        tree = SearchTree([10, 5], policy="none")
        tree.root.height = 7
        tree.update_height(tree.root)
        self.assertEqual(tree.root.height, 2)


class TestSearchTreeValidity(unittest.TestCase):
    def test_corrupted_height_is_detected(self):
        tree = SearchTree([10, 5, 15])
        tree.root.height = 5
        self.assertFalse(tree.is_valid())

    def test_corrupted_parent_is_detected(self):
        tree = SearchTree([10, 5, 15])
        tree.root.left.parent = None
        self.assertFalse(tree.is_valid())

    def test_corrupted_order_is_detected(self):
        tree = SearchTree([10, 5, 15])
        tree.root.left.key = 12
        self.assertFalse(tree.is_valid())

    def test_random_operations_on_plain_tree(self):
        rng = random.Random(7)
        tree = SearchTree(policy="none")
        present = set()
        for _ in range(1000):
            key = rng.randrange(100)
            if rng.random() < 0.5:
                tree.insert(key)
                present.add(key)
            else:
                tree.remove(key)
                present.discard(key)
            self.assertTrue(tree.is_valid())
        self.assertEqual(tree.in_order(), sorted(present))
        self.assertEqual(len(tree), len(present))


class TestSearchTreeRender(unittest.TestCase):
    def test_render_delegates_to_outline(self):
        tree = SearchTree([20, 10, 30])
        self.assertEqual(tree.render(), "└── 20\n    ├── 10\n    └── 30")

    def test_render_empty(self):
        self.assertEqual(SearchTree().render(), "")


if __name__ == '__main__':
    unittest.main()
