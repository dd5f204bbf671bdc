"""Custom exception classes for the Grid Chase strategy engine."""

from typing import Optional


class GridChaseError(Exception):
    """Base exception for all grid chase errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """Initialize GridChaseError.

        Args:
            message: Human-readable error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PolicyViolationError(GridChaseError):
    """Raised when a weight matrix leaves no move to choose from."""

    def __init__(self, weights, **kwargs):
        super().__init__(f"Move weights sum to zero: {weights}", **kwargs)
        self.weights = weights


class SpyExhaustedError(GridChaseError):
    """Raised when a spy is consulted more often than it allows."""

    def __init__(self, max_uses: int, **kwargs):
        super().__init__(f"Spy already used {max_uses} time(s)", **kwargs)
        self.max_uses = max_uses


class InvalidMoveError(GridChaseError):
    """Raised when a direction is not one of the nine relative moves."""

    def __init__(self, move, **kwargs):
        super().__init__(f"Invalid move: {move}", **kwargs)
        self.move = move


class ConfigurationError(GridChaseError):
    """Raised when configuration is invalid."""

    def __init__(self, reason: str, **kwargs):
        super().__init__(f"Configuration error: {reason}", **kwargs)
