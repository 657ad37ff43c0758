"""Rule constants for the fire breaker game.

These values are fixed by the rules and shared by the board engine,
the brigades and the player management.
"""

# Board
MINIMUM_BOARD_SIZE = 5
MOVE_DISTANCE = 2

# Fire brigades
TANK_CAPACITY = 3
ACTION_POINTS = 3

# Reputation economy
STARTING_REPUTATION = 5
BRIGADE_COST = 5

# Players in turn order, the successor of the last one is the first one
PLAYER_TAGS = ("A", "B", "C", "D")
AMOUNT_OF_PLAYERS = len(PLAYER_TAGS)

# Result tokens returned by the game handler
VALID_COMMAND = "OK"
PLAYERS_HAVE_WON = "win"
PLAYERS_HAVE_LOST = "lose"

# Rendering
NOT_BURNING = "x"
LAKE_SYMBOL = "L"
FIELD_SEPARATOR = ","
