"""
Game configuration for TicTacToe.
All the settings for the board, the AI and the console game.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to taste, or override them from the command line!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # Characters accepted as an empty cell in board strings
    EMPTY_SYMBOLS = ".- "

    # ==================== PLAYER SETTINGS ====================
    FIRST_PLAYER = "X"          # X always opens
    DEFAULT_HUMAN_PLAYER = "X"

    # ==================== AI SETTINGS ====================
    DIFFICULTIES = ["easy", "medium", "hard"]
    DEFAULT_DIFFICULTY = "hard"

    # Chance that MEDIUM uses the search instead of a random cell
    MEDIUM_SEARCH_PROBABILITY = 0.5

    # Pause before the AI replies so it looks like it is thinking (seconds)
    AI_DELAY_SECONDS = 0.5

    # ==================== DEBUG SETTINGS ====================
    VERBOSE = False  # Print search statistics for every AI move
