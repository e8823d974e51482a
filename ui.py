"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Mode selection (two players / vs computer)
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.engine import GameEngine
from logic.game_state import GameMode, Player
from logic.session import ComputerTurn, GameSession
from snapshot import save_snapshot


CELL_BG = '#16213e'
WIN_BG = '#b45309'
MARK_COLORS = {
    Player.X: '#f87171',
    Player.O: '#10b981',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, mode: GameMode = GameMode.WITH_COMPUTER, config: Optional[GameConfig] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.mode = mode
        self.session = GameSession(GameEngine(self.config))

        # Tk timer id of the scheduled computer move
        self.pending_after_id: Optional[str] = None

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for pos in range(9):
            row, col = divmod(pos, 3)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_BG,
                fg='white',
                activebackground='#1f2b4d',
                relief='ridge',
                borderwidth=2,
                command=lambda p=pos: self._on_cell_click(p)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Status
        self.status_label = ttk.Label(main_frame, text="Choose a mode to start", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        # Mode buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="Two Players",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=lambda: self._start_game(GameMode.TWO_PLAYER)
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Vs Computer",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self._start_game(GameMode.WITH_COMPUTER)
        ).pack(side=tk.LEFT, padx=5)

        extra_frame = ttk.Frame(main_frame)
        extra_frame.pack(pady=5)

        tk.Button(
            extra_frame,
            text="Save Snapshot",
            font=('Segoe UI', 10),
            bg='#2d3748',
            fg='white',
            width=12,
            command=self._save_snapshot
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            extra_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _start_game(self, mode: GameMode):
        """Start a new game, dropping any pending computer move."""
        print(f"Starting game ({mode.value})...")
        self._cancel_pending()
        self.mode = mode
        self.session.start_game(mode)
        self._refresh()
        self._schedule_computer_turn()

    def _on_cell_click(self, position: int):
        """Handle a click on the board."""
        before = self.session.state
        after = self.session.request_move(position)
        if after is before:
            return

        self._refresh()
        self._schedule_computer_turn()

    def _schedule_computer_turn(self):
        """Ask the computer for a move and play it after the thinking delay."""
        turn = self.session.computer_turn()
        if turn is None:
            return

        self.turn_label.configure(text="Turn: Computer (thinking...)")
        delay_ms = int(turn.delay * 1000)
        self.pending_after_id = self.root.after(delay_ms, lambda: self._play_computer_turn(turn))

    def _play_computer_turn(self, turn: ComputerTurn):
        self.pending_after_id = None
        self.session.play_computer_turn(turn)
        self._refresh()

    def _cancel_pending(self):
        if self.pending_after_id is not None:
            self.root.after_cancel(self.pending_after_id)
            self.pending_after_id = None

    def _refresh(self):
        """Update the board grid and status labels."""
        state = self.session.state
        winning = self.session.winning_positions

        for pos, cell in enumerate(self.board_cells):
            owner = state.board[pos]
            bg = WIN_BG if pos in winning else CELL_BG
            if owner is None:
                cell.configure(text="", bg=bg)
            else:
                cell.configure(text=owner.value, bg=bg, fg=MARK_COLORS[owner])

        if state.status.is_game_over:
            winner = state.status.winner
            if winner is None:
                self.status_label.configure(text="It's a DRAW!")
            elif winner == state.computer_player:
                self.status_label.configure(text="Computer WINS!")
            else:
                self.status_label.configure(text=f"{winner.value} WINS!")
            self.turn_label.configure(text="Game Over")
        elif state.status.is_in_progress:
            self.status_label.configure(text="Game in progress")
            current = state.current_player.value
            if state.current_player == state.computer_player:
                current += " (Computer)"
            self.turn_label.configure(text=f"Turn: {current}")

    def _save_snapshot(self):
        path = save_snapshot(self.session.state, config=self.config)
        print(f"Saved: {path}")
        self.status_label.configure(text=f"Saved {path}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_pending()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self._start_game(self.mode)
        self.root.mainloop()
