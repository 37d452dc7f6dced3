"""
Console configuration for TicTacToe.
All the text the player sees lives here.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values to restyle the game!
    """

    # ==================== BOARD DRAWING ====================
    CELL_SEPARATOR = " | "
    ROW_SEPARATOR = "---+---+---"

    # Show the position number in empty cells so players know what to type
    SHOW_POSITION_NUMBERS = True

    # ==================== INPUT ====================
    MOVE_PROMPT = "Player {player}, enter your move (1-9): "
    INVALID_INPUT_MESSAGE = "Please enter a number between 1 and 9."
    PLAY_AGAIN_PROMPT = "Want to play another round? (y/n): "
    YES_ANSWERS = ("y", "yes")

    # ==================== MESSAGES ====================
    WELCOME_MESSAGE = "Welcome to Tic-Tac-Toe! Player 1 is X, Player 2 is O."
    GUIDE_HEADER = "Use numbers (1-9) to choose a position:"
    GOOD_MOVE_MESSAGE = "Nice move!"
    OCCUPIED_MESSAGE = "That spot's already taken. Try again!"
    GAME_OVER_MESSAGE = "This round is already over."
    WIN_MESSAGE = "Player {player} wins! Great game!"
    DRAW_MESSAGE = "It's a tie! Well played, both of you!"
    FAREWELL_MESSAGE = "Thanks for playing Tic-Tac-Toe! See you next time!"
