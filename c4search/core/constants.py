# c4search/core/constants.py

# --- Win Condition ---
# Number of same-colored pieces in a line that ends the game
CONNECT = 4

# --- Search Parameters ---
# Plies searched exactly before the rollout horizon takes over
SEARCH_DEPTH = 5
# Every ply down the tree is worth less: prefer fast wins, slow losses
DISCOUNT = 0.9
# Random playouts averaged at the horizon
ROLLOUT_PLAYOUTS = 10
# Worker threads used by the rollout estimator (1 = run inline).
# Playouts are pure Python and hold the GIL, so extra threads only add overhead.
ROLLOUT_WORKERS = 1

# --- Scoring System ---
# P1 maximizes, P2 minimizes. Values live in [-1, 1].
WIN_SCORE = 1.0
LOSS_SCORE = -1.0
DRAW_SCORE = 0.0

# Stands in for +/- infinity when a search level starts
VALUE_BOUND = 2.0
