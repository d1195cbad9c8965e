import logging

from c4search.core.board import BoardState, Player
from c4search.core.config import load_config
from c4search.core.searcher import Searcher

COLS = 7
ROWS = 6

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=======================================")
    print("   CONNECT FOUR: Human vs Search Engine")
    print("=======================================")

    board = BoardState.empty(COLS, ROWS)
    turn = Player.P1
    winner = None

    with Searcher(load_config()) as engine:
        print(board.render())

        while winner is None and not board.is_full():

            # --- Human Turn (Player 1) ---
            if turn == Player.P1:
                valid_moves = board.legal_columns()
                try:
                    user_input = input(f"\nYour Move (Columns {valid_moves}): ")
                    col = int(user_input)
                except ValueError:
                    print("Please enter a valid number.")
                    continue
                if col not in valid_moves:
                    print("Invalid column. Try again.")
                    continue

            # --- Engine Turn (Player 2) ---
            else:
                print("\nEngine is thinking...")
                col = engine.search(board, turn)
                print(f"Engine plays Column: {col}")

            board = board.apply_move(col, turn)
            if board.is_decided(col):
                winner = turn
            turn = turn.switch()

            # Show Board
            print("\n" + board.render())

    # --- End Game ---
    if winner is not None:
        winner_name = "Human" if winner == Player.P1 else "Engine"
        print(f"\nGame Over! Winner: {winner_name}")
    else:
        print("\nGame Over! It's a Draw.")

if __name__ == "__main__":
    main()
