# Nominal extent of the space the strategies reason over. Only used to anchor
# the initial opponent guess; barriers are stored sparsely.
WORKING_GRID_SIZE = 100
BORDER_INDEX = 0

# One of this many equally likely outcomes keeps the vertical priority,
# every other outcome flips it.
PRIORITY_FLIP_OUTCOMES = 3

SIDES = {
    "attacker": {
        "guess_row": WORKING_GRID_SIZE - 2,
        "spy_countdown": (3, 7),
        "priority_interval": (5, 14),
        "goal_weights": (1, 2, 17),
        "vertical_weights": (1, 4, 15),
    },
    "defender": {
        "guess_row": 1,
        "spy_countdown": (4, 8),
        "priority_interval": (5, 19),
        "goal_weights": (1, 3, 16),
        "vertical_weights": (3, 5, 12),
        "proximity_weights": (9, 6, 5),  # closest, middle, farthest
    },
}
