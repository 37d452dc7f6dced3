"""
Text rendering for TicTacToe.
Draws the board and results for the console.
"""

from typing import Optional

from logic.board import Board, Cell
from logic.game_engine import MoveResult, Outcome
from .config import ConsoleConfig


class BoardRenderer:
    """
    Turns boards and results into printable strings.

     1 | X | 3
    ---+---+---
     4 | O | 6
    ---+---+---
     7 | 8 | 9
    """

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()

    def _cell_text(self, board: Board, row: int, col: int) -> str:
        cell = board.cell_at(row, col)
        if cell != Cell.EMPTY:
            return cell.symbol
        if self.config.SHOW_POSITION_NUMBERS:
            return str(row * board.SIZE + col + 1)
        return " "

    def render(self, board: Board) -> str:
        """
        Draw the board.

        Args:
            board: Board to draw. Only read through cell_at().

        Returns:
            Multi-line string, no trailing newline.
        """
        lines = []
        for row in range(board.SIZE):
            cells = [self._cell_text(board, row, col) for col in range(board.SIZE)]
            lines.append(" " + self.config.CELL_SEPARATOR.join(cells) + " ")
            if row < board.SIZE - 1:
                lines.append(self.config.ROW_SEPARATOR)
        return "\n".join(lines)

    def render_guide(self) -> str:
        """Draw the position numbering on an empty board."""
        guide = ConsoleConfig()
        guide.CELL_SEPARATOR = self.config.CELL_SEPARATOR
        guide.ROW_SEPARATOR = self.config.ROW_SEPARATOR
        guide.SHOW_POSITION_NUMBERS = True
        return BoardRenderer(guide).render(Board())

    def render_result(self, result: MoveResult) -> Optional[str]:
        """
        Describe a finished round.

        Returns:
            The win/draw message, or None if the round is not over.
        """
        if result.outcome == Outcome.WON:
            return self.config.WIN_MESSAGE.format(player=result.player.value)
        if result.outcome == Outcome.DRAW:
            return self.config.DRAW_MESSAGE
        return None
