# c4search/core/tree.py
from dataclasses import dataclass
from typing import List, Union

from .board import BoardState, Player


@dataclass
class Leaf:
    """Decided position: P1, P2 or DRAW."""
    winner: Player

    @property
    def value(self) -> float:
        return self.winner.score


@dataclass
class Branch:
    column: int
    node: "Node"


class InnerNode:
    """
    Undecided position with `turn` to move.
    Children are only built when expand() is called, one branch per legal column.
    """

    def __init__(self, board: BoardState, turn: Player):
        self.board = board
        self.turn = turn
        self.children: List[Branch] = []
        self.expanded = False

    def expand(self) -> List[Branch]:
        if self.expanded:
            return self.children
        self.expanded = True

        size = self.board.width * self.board.height
        for col in range(self.board.width):
            next_board = self.board.apply_move(col, self.turn)
            if next_board is None:
                # Full column: no branch
                continue

            # Collapse decided lines now so the search never recurses into them
            if next_board.is_decided(col):
                node = Leaf(winner=self.turn)
            elif next_board.turn_number >= size:
                node = Leaf(winner=Player.DRAW)
            else:
                node = InnerNode(next_board, self.turn.switch())

            self.children.append(Branch(column=col, node=node))

        return self.children

    def __repr__(self):
        return f"InnerNode(turn={self.turn.name}, children={len(self.children)})"


Node = Union[Leaf, InnerNode]
