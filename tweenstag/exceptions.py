"""Exception classes for the animation engine."""


class TweenstagError(Exception):
    """Base exception for engine errors."""

    pass


class ClipCycleError(TweenstagError):
    """Raised when a clip contains an instance of itself, directly or transitively."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Clip cycle detected: {' -> '.join(cycle)}")


class PlaybackError(TweenstagError):
    """Raised for invalid playback configuration."""

    pass
