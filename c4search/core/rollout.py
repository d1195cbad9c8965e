# c4search/core/rollout.py
"""Random-playout value estimate, used where the exact search stops.

For a position and a player to move, the estimator:
1. Plays N independent games of uniformly random legal moves to the end
2. Scores each one +1 (P1 wins), -1 (P2 wins) or 0 (draw)
3. Returns the mean

Every playout owns its random generator, seeded from its index, so a
playout is reproducible on its own and playouts share no mutable state.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Optional

from .board import BoardState, Player
from .constants import DRAW_SCORE

logger = logging.getLogger(__name__)

# Spreads neighbouring run indexes apart for a given base seed
SEED_STRIDE = 1_000_003


def playout_seed(index: int, base_seed: int = 0) -> int:
    return base_seed * SEED_STRIDE + (index + 1) * (index + 2) + index


def random_rollout(board: BoardState, player: Player, rng: random.Random) -> float:
    """Plays random moves from `board` until the game ends."""
    size = board.width * board.height
    candidates = list(range(board.width))

    while candidates:
        col = rng.choice(candidates)
        next_board = board.apply_move(col, player)

        if next_board is None:
            # Column just turned out to be full: retry without using a ply
            candidates.remove(col)
            continue

        board = next_board
        if board.is_decided(col):
            return player.score
        if board.turn_number >= size:
            break
        player = player.switch()

    return DRAW_SCORE


class RolloutEstimator:
    def __init__(self, max_workers: int = 1, base_seed: int = 0):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self.base_seed = base_seed
        self._executor: Optional[ThreadPoolExecutor] = None

    def _run(self, board: BoardState, player: Player, index: int) -> float:
        rng = random.Random(playout_seed(index, self.base_seed))
        return random_rollout(board, player, rng)

    def estimate(self, board: BoardState, player: Player, num_playouts: int) -> float:
        """Mean outcome of `num_playouts` random games, in [-1, 1]."""
        if num_playouts < 1:
            raise ValueError(f"num_playouts must be at least 1, got {num_playouts}")

        job = partial(self._run, board, player)
        if self.max_workers == 1:
            outcomes = map(job, range(num_playouts))
        else:
            if self._executor is None:
                logger.debug("Starting rollout pool with %d workers", self.max_workers)
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="rollout"
                )
            outcomes = self._executor.map(job, range(num_playouts))

        return sum(outcomes) / num_playouts

    def close(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
