"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
"""

import time
from typing import Optional

from logic.config import GameConfig
from logic.engine import GameEngine
from logic.game_state import GameMode
from logic.session import GameSession
from snapshot import save_snapshot


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Commands:
    - 0-8: play that cell
    - s: save a board snapshot
    - r: restart
    - q: quit
    """

    def __init__(self, mode: GameMode, config: Optional[GameConfig] = None, think: bool = True):
        self.config = config or GameConfig()
        self.mode = mode
        self.think = think
        self.session = GameSession(GameEngine(self.config))
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print("Type a cell number (0-8), 's' to save a snapshot, 'r' to restart, 'q' to quit\n")

        self.session.start_game(self.mode)
        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        while self.is_running:
            state = self.session.state
            state.print_board()

            if state.status.is_game_over:
                self._show_game_result()
                if not self._ask_play_again():
                    break
                self.session.start_game(self.mode)
                continue

            if self.session.is_computer_turn():
                self._computer_move()
            else:
                self._human_move()

    def _computer_move(self):
        print("\n>>> Computer is thinking...")
        turn = self.session.computer_turn()
        if turn is None:
            return
        if self.think:
            time.sleep(turn.delay)
        self.session.play_computer_turn(turn)
        print(f">>> Computer plays {turn.position}")

    def _human_move(self):
        command = input(f"{self.session.state.current_player.value} > ").strip().lower()

        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "s":
            path = save_snapshot(self.session.state, config=self.config)
            print(f"Saved: {path}")
        elif command == "r":
            print("\nResetting game...")
            self.session.start_game(self.mode)
        elif command.isdecimal():
            before = self.session.state
            if self.session.request_move(int(command)) is before:
                print("Illegal move. Try again.")
        else:
            print("Please type a number 0-8.")

    def _show_game_result(self):
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        state = self.session.state
        if state.status.winner is None:
            print("\nIt's a draw! Good game!")
        elif state.status.winner == state.computer_player:
            print("\nComputer wins! Better luck next time!")
        else:
            print(f"\n{state.status.winner.value} wins! Congratulations!")

    def _ask_play_again(self) -> bool:
        return input("\nPlay again? [y/N] ").strip().lower() == "y"


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.WITH_COMPUTER.value,
        help="Play against the computer or another human"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the computer's thinking time (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine diagnostics"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.debug
    mode = GameMode(args.mode)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*40)
        print("   TicTacToe UI")
        print("="*40 + "\n")
        ui = TicTacToeUI(mode=mode, config=config)
        ui.run()
        return

    game = ConsoleGame(mode, config=config, think=not args.no_delay)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
