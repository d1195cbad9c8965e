# c4search/core/searcher.py
import logging
from typing import Dict, Optional, Tuple

from .board import BoardState, Player
from .config import SearchConfig
from .constants import VALUE_BOUND
from .errors import NoLegalMoveError
from .rollout import RolloutEstimator
from .tree import InnerNode, Leaf, Node
from c4search.schemas.report import SearchReport

logger = logging.getLogger(__name__)


class SearchContext:
    """
    Bookkeeping for one level of the minimax walk.
    P1 always maximizes and P2 always minimizes, whoever called the search.
    """

    def __init__(self, player: Player, alpha: float, beta: float, depth: int):
        self.player = player
        self.maximizing = player == Player.P1
        self.value = -VALUE_BOUND if self.maximizing else VALUE_BOUND
        self.alpha = alpha
        self.beta = beta
        self.depth = depth
        self.best_move: Optional[int] = None

    @classmethod
    def root(cls, player: Player, depth: int) -> "SearchContext":
        return cls(player, -VALUE_BOUND, VALUE_BOUND, depth)

    def next(self) -> "SearchContext":
        return SearchContext(self.player.switch(), self.alpha, self.beta, self.depth - 1)

    def update(self, score: float, move: int) -> bool:
        """
        Folds one child's score into this level. Returns True on a cutoff.
        """
        if self.best_move is None:
            self.best_move = move

        # The window moves with the value held before this fold
        previous = self.value
        if self.maximizing:
            if score > self.value:
                self.value = score
                self.best_move = move
            self.alpha = max(self.alpha, previous)
        else:
            if score < self.value:
                self.value = score
                self.best_move = move
            self.beta = min(self.beta, previous)

        # Cutoff: the move that collapsed the window is reported as best
        if self.beta <= self.alpha:
            self.best_move = move
            return True
        return False


class Searcher:
    def __init__(self, config: Optional[SearchConfig] = None,
                 estimator: Optional[RolloutEstimator] = None):
        self.config = config or SearchConfig()
        self.estimator = estimator or RolloutEstimator(
            max_workers=self.config.rollout_workers,
            base_seed=self.config.rollout_seed,
        )
        self.nodes = 0

    def search(self, board: BoardState, player: Player) -> int:
        """Root Entry Point. Returns the column to play."""
        ctx, _ = self._search_root(board, player)
        logger.info("Player %s plays column %d (value %.4f, %d nodes)",
                    player.name, ctx.best_move, ctx.value, self.nodes)
        return ctx.best_move

    def analyze(self, board: BoardState, player: Player) -> SearchReport:
        """Same walk as search(), with the root scores and node count."""
        ctx, scores = self._search_root(board, player)
        return SearchReport(
            player=int(player),
            best_move=ctx.best_move,
            best_score=ctx.value,
            scores=scores,
            nodes_explored=self.nodes,
        )

    def _search_root(self, board: BoardState, player: Player) -> Tuple[SearchContext, Dict[int, float]]:
        if player == Player.EMPTY:
            raise ValueError("Search needs a player to move, got EMPTY")

        self.nodes = 0
        root = InnerNode(board.copy(), player)
        children = root.expand()
        if not children:
            raise NoLegalMoveError(f"No legal move on {board!r}")

        ctx = SearchContext.root(player, self.config.depth)
        scores: Dict[int, float] = {}

        # Root scores are folded undiscounted
        for branch in children:
            score = self._step(branch.node, ctx.next())
            scores[branch.column] = score
            logger.debug("Root column %d scored %.4f", branch.column, score)
            if ctx.update(score, branch.column):
                break

        return ctx, scores

    def _step(self, node: Node, ctx: SearchContext) -> float:
        self.nodes += 1

        # 1. Decided position
        if isinstance(node, Leaf):
            return node.value

        # 2. Horizon: statistical stand-in for deeper search
        if ctx.depth <= 0:
            return self.estimator.estimate(node.board, node.turn, self.config.rollout_playouts)

        # 3. Recursive search
        for branch in node.expand():
            score = self.config.discount * self._step(branch.node, ctx.next())
            if ctx.update(score, branch.column):
                break

        return ctx.value

    def close(self):
        self.estimator.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def search(board: BoardState, player: Player) -> int:
    """One-shot search with the default configuration."""
    with Searcher() as searcher:
        return searcher.search(board, player)
