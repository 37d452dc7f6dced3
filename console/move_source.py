"""
Keyboard move source for TicTacToe.
Keeps asking until the player types a number between 1 and 9.
"""

from typing import Callable, Optional

from logic.game_state import Player
from .config import ConsoleConfig


class MoveSource:
    """
    Reads moves from the keyboard.

    The engine only ever sees an int in 1-9 from here. Anything else
    the player types is rejected with a message and asked again.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the move source.

        Args:
            config: Console text settings.
            input_func: Reads one line given a prompt (default: input).
            output_func: Prints one message (default: print).
        """
        self.config = config or ConsoleConfig()
        self.input_func = input_func or input
        self.output_func = output_func or print

    @staticmethod
    def parse_move(raw: str) -> Optional[int]:
        """
        Parse raw text into a position number.

        Returns:
            The position (1-9), or None if the text is not one.
        """
        try:
            move = int(raw.strip())
        except ValueError:
            return None

        if 1 <= move <= 9:
            return move
        return None

    def get_move(self, player: Player) -> int:
        """
        Ask a player for a move until they give a valid one.

        Args:
            player: Whose turn it is (used in the prompt).

        Returns:
            Position number (1-9).

        Raises:
            EOFError: If input runs out.
        """
        prompt = self.config.MOVE_PROMPT.format(player=player.value)
        while True:
            move = self.parse_move(self.input_func(prompt))
            if move is not None:
                return move
            self.output_func(self.config.INVALID_INPUT_MESSAGE)

    def ask_yes_no(self, prompt: str) -> bool:
        """Ask a yes/no question. Anything but a yes answer counts as no."""
        answer = self.input_func(prompt).strip().lower()
        return answer in self.config.YES_ANSWERS
