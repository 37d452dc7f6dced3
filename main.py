"""
Main orchestration script for console TicTacToe.

This script ties together:
- Logic (board, move validation, win checking, turn engine)
- Console (keyboard move source, board renderer)

Run this script to play TicTacToe with a friend on one keyboard!
"""

from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_engine import GameEngine, MoveResult, Outcome
from logic.errors import InvalidPositionError, OccupiedCellError, GameAlreadyOverError

from console.config import ConsoleConfig
from console.move_source import MoveSource
from console.renderer import BoardRenderer


class TicTacToeConsole:
    """
    Main controller for a console TicTacToe session.

    Game flow:
    1. Current player types a position (1-9)
    2. Engine validates and applies the move
    3. Board is shown again
    4. Repeat until someone wins or it's a draw
    5. Offer another round
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        console_config: Optional[ConsoleConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the console game.

        Args:
            game_config: Rule settings for the engine.
            console_config: Text settings for prompts and messages.
            input_func: Reads one line given a prompt (default: input).
            output_func: Prints one message (default: print).
        """
        self.console_config = console_config or ConsoleConfig()
        self.output = output_func or print

        self.engine = GameEngine(game_config)
        self.move_source = MoveSource(self.console_config, input_func, output_func)
        self.renderer = BoardRenderer(self.console_config)

        self.rounds_played = 0

    def _show_board(self):
        self.output("\n" + self.renderer.render(self.engine.board) + "\n")

    def _show_welcome(self):
        self.output(self.console_config.WELCOME_MESSAGE)
        self.output(self.console_config.GUIDE_HEADER)
        self.output(self.renderer.render_guide())

    def play_round(self) -> MoveResult:
        """
        Play one round to the end.

        Returns:
            The terminal MoveResult (WON or DRAW), or the GameAlreadyOver
            rejection if the engine refused to continue.
        """
        self.engine.new_round()

        while True:
            position = self.move_source.get_move(self.engine.current_player)
            result = self.engine.apply_move(position)

            if result.is_error:
                if isinstance(result.error, OccupiedCellError):
                    self.output(self.console_config.OCCUPIED_MESSAGE)
                elif isinstance(result.error, InvalidPositionError):
                    self.output(self.console_config.INVALID_INPUT_MESSAGE)
                elif isinstance(result.error, GameAlreadyOverError):
                    # The loop should have stopped already; end the round
                    self.output(self.console_config.GAME_OVER_MESSAGE)
                    return result
                # Show the board again for reference
                self._show_board()
                continue

            self.output(self.console_config.GOOD_MOVE_MESSAGE)
            self._show_board()

            if result.outcome != Outcome.CONTINUE:
                self.output(self.renderer.render_result(result))
                self.rounds_played += 1
                return result

    def start(self, rounds: Optional[int] = None):
        """
        Run the session.

        Args:
            rounds: Play exactly this many rounds without asking.
                    If None, ask after every round.
        """
        self._show_welcome()

        while True:
            self.play_round()

            if rounds is not None:
                if self.rounds_played >= rounds:
                    break
                continue

            if not self.move_source.ask_yes_no(self.console_config.PLAY_AGAIN_PROMPT):
                break
            self.output("")

        self.output(self.console_config.FAREWELL_MESSAGE)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Play this many rounds without asking to play again"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print an engine trace line for every move"
    )

    args = parser.parse_args(argv)

    if args.rounds is not None and args.rounds < 1:
        parser.error("--rounds must be at least 1")

    game_config = GameConfig()
    game_config.DEBUG_MODE = args.debug

    game = TicTacToeConsole(game_config=game_config)

    try:
        game.start(rounds=args.rounds)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted.")
        print(game.console_config.FAREWELL_MESSAGE)


if __name__ == "__main__":
    main()
