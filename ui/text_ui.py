from __future__ import annotations

from typing import Callable

from checkers.game import CheckersGame

from .controller import BoardController, ClickResult

HELP_TEXT = "Enter 'row col' to select or move, 'moves' to list moves, 'reset' or 'quit'."


class TerminalUI:
    """Line-oriented controller that plays the game in a terminal."""

    def __init__(
        self,
        game: CheckersGame,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self.controller = BoardController(game)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def run(self) -> None:
        self.output_fn(HELP_TEXT)
        self.displayBoard()
        while True:
            try:
                line = self.input_fn(f"{self.game.getCurrentPlayer().value} > ")
            except EOFError:
                return
            if not self.handleCommand(line):
                return

    def handleCommand(self, line: str) -> bool:
        """Apply one command; returns False when the session should end."""
        command = line.strip().lower()
        if command in ("quit", "exit", "q"):
            return False
        if command == "reset":
            self.controller.reset()
            self.displayBoard()
            return True
        if command == "moves":
            moves = self.game.getValidMoves()
            if not moves:
                self.output_fn("No piece selected." if self.game.getSelected() is None else "No moves for this piece.")
            for i, move in enumerate(moves, 1):
                self.output_fn(f"   {i}: {move}")
            return True

        try:
            row, col = (int(part) for part in command.replace(",", " ").split())
        except ValueError:
            self.output_fn(f"Invalid input. {HELP_TEXT}")
            return True

        result = self.controller.handleCell(row, col)
        if result is ClickResult.SELECTED:
            self.output_fn(f"Selected {row},{col}: {len(self.game.getValidMoves())} move(s).")
        elif result is ClickResult.MOVED:
            self.displayBoard()
        else:
            self.output_fn("Selection cleared.")
        return True

    def displayBoard(self) -> None:
        self.output_fn(str(self.game.board))
        current = self.game.getCurrentPlayer().value
        if self.game.canAnyMove():
            self.output_fn(f"{current.capitalize()} to move.")
        else:
            self.output_fn(f"No moves for {current}.")
