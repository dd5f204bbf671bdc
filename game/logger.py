import copy


EVENT_TURN_START = "turn_start"
EVENT_AGENT_MOVE = "agent_move"
EVENT_MOVE_BLOCKED = "move_blocked"
EVENT_INVALID_MOVE = "invalid_move"
EVENT_SPY_USED = "spy_used"
EVENT_GAME_OVER = "game_over"

class GameLogger:
    def __init__(self):
        self.turn_logs = []
        self.events = []
        self.current_turn = []
        self.snapshots = []
        self.state_index = 0

    def new_turn(self, turn_num):
        if self.current_turn:
            self.turn_logs.append(self.current_turn)
        self.current_turn = [f"--- Turn {turn_num} ---"]

    def log(self, message):
        self.current_turn.append(message)

    def log_state(self, state_dict):
        state_dict_copy = copy.deepcopy(state_dict)
        state_dict_copy["state_index"] = self.state_index
        self.snapshots.append(state_dict_copy)
        self.state_index += 1

    def finalize(self):
        if self.current_turn:
            self.turn_logs.append(self.current_turn)
            self.current_turn = []

    def print_log(self):
        for turn in self.turn_logs:
            for line in turn:
                print(line)

    def get_log(self):
        return self.turn_logs

    def get_snapshots(self):
        return self.snapshots

    # EVENT LOGS

    def _log_event(self, turn, event, details):
        self.events.append({
            "turn": turn,
            "event": event,
            "details": details
        })

    def log_event_turn_start(self, turn):
        self._log_event(turn, EVENT_TURN_START, {})

    def log_event_agent_move(self, turn, agent, new_position):
        # Only track agents that actually move
        if agent.position == new_position:
            return
        self._log_event(turn, EVENT_AGENT_MOVE, {
            "name": agent.name,
            "move": str(tuple(agent.position)) + '->' + str(tuple(new_position))
        })

    def log_event_move_blocked(self, turn, agent, target):
        self._log_event(turn, EVENT_MOVE_BLOCKED, {
            "name": agent.name,
            "position": list(agent.position),
            "target": list(target)
        })

    def log_event_invalid_move(self, turn, agent, move):
        self._log_event(turn, EVENT_INVALID_MOVE, {
            "name": agent.name,
            "move": repr(move)
        })

    def log_event_spy_used(self, turn, spy_owner, reader):
        self._log_event(turn, EVENT_SPY_USED, {
            "spied": spy_owner.name,
            "by": reader.name,
            "position": list(spy_owner.position)
        })

    def log_event_game_over(self, turn, winner):
        self._log_event(turn, EVENT_GAME_OVER, {"winner": winner})

    def get_events(self, event):
        return [e for e in self.events if e["event"] == event]
