# c4search/core/config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import SEARCH_DEPTH, DISCOUNT, ROLLOUT_PLAYOUTS, ROLLOUT_WORKERS

CONFIG_ENV_VAR = "C4SEARCH_CONFIG"


class SearchConfig(BaseModel):
    depth: int = Field(default=SEARCH_DEPTH, ge=0)
    discount: float = Field(default=DISCOUNT, gt=0.0, le=1.0)
    rollout_playouts: int = Field(default=ROLLOUT_PLAYOUTS, ge=1)
    rollout_workers: int = Field(default=ROLLOUT_WORKERS, ge=1)
    rollout_seed: int = 0


def load_config(path: Optional[str] = None) -> SearchConfig:
    """
    Reads the `search:` section of a YAML file.
    Without an explicit path, C4SEARCH_CONFIG (environment or .env) is used;
    with neither, the built-in defaults apply.
    """
    load_dotenv()
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return SearchConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return SearchConfig(**data.get("search", {}))
