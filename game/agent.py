from game.position import Position


class Agent:
    def __init__(self, name, side, position):
        self.name = name
        self.side = side
        self.position = Position(*position)
        self.blocked_moves = 0

    def move_to(self, position):
        self.position = Position(*position)

    def to_dict(self):
        return {
            "name": self.name,
            "side": self.side,
            "position": list(self.position),
            "blocked_moves": self.blocked_moves,
        }
