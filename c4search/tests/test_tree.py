import unittest
from c4search.core.board import BoardState, Player
from c4search.core.tree import InnerNode, Leaf


class TestGameTree(unittest.TestCase):
    def test_children_are_lazy(self):
        root = InnerNode(BoardState.from_int_array([0] * 4, 4, 1), Player.P1)
        self.assertEqual(root.children, [])
        root.expand()
        self.assertEqual([b.column for b in root.children], [0, 1, 2, 3])

    def test_leaf_on_win(self):
        b = BoardState.from_int_array([1, 1, 1, 0, 0], 5, 1)
        root = InnerNode(b, Player.P1)
        root.expand()
        self.assertEqual(len(root.children), 2)

        branch1, branch2 = root.children
        self.assertEqual(branch1.column, 3)
        self.assertEqual(branch2.column, 4)

        self.assertIsInstance(branch1.node, Leaf)
        self.assertEqual(branch1.node.winner, Player.P1)
        self.assertEqual(branch1.node.value, 1.0)

        self.assertIsInstance(branch2.node, InnerNode)
        self.assertEqual(branch2.node.turn, Player.P2)
        self.assertEqual(branch2.node.board.turn_number, root.board.turn_number + 1)

    def test_leaf_on_full(self):
        b = BoardState.from_int_array([1, 1, 1, -1, 0], 5, 1)
        root = InnerNode(b, Player.P1)
        root.expand()

        self.assertEqual(len(root.children), 1)
        branch = root.children[0]
        self.assertEqual(branch.column, 4)
        self.assertIsInstance(branch.node, Leaf)
        self.assertEqual(branch.node.winner, Player.DRAW)
        self.assertEqual(branch.node.value, 0.0)

    def test_win_on_last_placement(self):
        b = BoardState.from_int_array([1, 1, 1, 0], 4, 1)
        root = InnerNode(b, Player.P1)
        root.expand()

        self.assertEqual(len(root.children), 1)
        branch = root.children[0]
        self.assertEqual(branch.column, 3)
        # A win on the last empty cell is a win, not a draw
        self.assertIsInstance(branch.node, Leaf)
        self.assertEqual(branch.node.winner, Player.P1)

    def test_two_ply_expansion(self):
        b = BoardState.from_int_array([-1, -1, 0, 1, 1, 1, 0], 7, 1)
        root = InnerNode(b, Player.P2)
        root.expand()

        self.assertEqual(len(root.children), 2)
        self.assertEqual(root.children[1].column, 6)

        inner = root.children[1].node
        self.assertIsInstance(inner, InnerNode)
        inner.expand()
        self.assertEqual(len(inner.children), 1)
        self.assertEqual(inner.children[0].column, 2)
        self.assertIsInstance(inner.children[0].node, Leaf)
        self.assertEqual(inner.children[0].node.winner, Player.P1)

    def test_loss_for_p2_mover(self):
        b = BoardState.from_int_array([-1, -1, -1, 0, 0, 0], 6, 1)
        root = InnerNode(b, Player.P2)
        root.expand()
        self.assertEqual(root.children[0].column, 3)
        self.assertEqual(root.children[0].node.winner, Player.P2)
        self.assertEqual(root.children[0].node.value, -1.0)

    def test_expand_is_one_shot(self):
        b = BoardState.from_int_array([0] * 12, 4, 3)
        root = InnerNode(b, Player.P1)
        first = list(root.expand())
        second = root.expand()

        self.assertEqual(len(root.children), 4)
        self.assertEqual([br.column for br in second], [br.column for br in first])
        for a, c in zip(first, second):
            self.assertIs(a.node, c.node)

    def test_expand_does_not_touch_parent_board(self):
        b = BoardState.from_int_array([0] * 12, 4, 3)
        root = InnerNode(b, Player.P1)
        root.expand()
        self.assertEqual(root.board.turn_number, 0)
        self.assertEqual(root.board.to_int_array(), [0] * 12)

    def test_full_board_has_no_children(self):
        b = BoardState.from_int_array([1, -1, 1, -1], 4, 1)
        root = InnerNode(b, Player.P1)
        self.assertEqual(root.expand(), [])


if __name__ == '__main__':
    unittest.main()
