from pydantic import BaseModel, Field
from typing import Dict


class SearchReport(BaseModel):
    player: int
    best_move: int
    best_score: float
    # Only the root columns the search actually folded (a cutoff stops early)
    scores: Dict[int, float] = Field(default_factory=dict)
    nodes_explored: int = 0
