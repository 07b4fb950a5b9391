"""Timeline playback.

The current frame is derived from elapsed wall-clock time (pauses
excluded), so a slow tick cadence drops frames instead of slowing the
animation down.

Example:
    from tweenstag.playback import PlaybackController, PlaybackConfig

    config = PlaybackConfig.from_project(project)
    controller = PlaybackController(config, on_frame=render)

    controller.play()
    controller.start_ticking()
    ...
    controller.stop()
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from tweenstag.config import settings
from tweenstag.exceptions import PlaybackError

if TYPE_CHECKING:
    from tweenstag.models import Project

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    """Playback state machine."""

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass
class PlaybackConfig:
    """Timeline playback configuration."""

    frame_rate: float = field(default_factory=lambda: settings.DEFAULT_FRAME_RATE)
    total_frames: int = 60
    loop: bool = True
    tick_interval: float | None = None  # Seconds between ticks (1 / frame_rate if None)

    def validate(self) -> None:
        """Raise PlaybackError for unusable settings."""
        if self.frame_rate <= 0:
            raise PlaybackError(f"Frame rate must be positive, got {self.frame_rate}")
        if self.total_frames < 1:
            raise PlaybackError(f"Total frames must be at least 1, got {self.total_frames}")
        if self.tick_interval is not None and self.tick_interval <= 0:
            raise PlaybackError(f"Tick interval must be positive, got {self.tick_interval}")

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return self.tick_interval or 1.0 / self.frame_rate

    @classmethod
    def from_project(cls, project: "Project", loop: bool = True) -> "PlaybackConfig":
        return cls(frame_rate=project.frame_rate, total_frames=project.total_frames, loop=loop)


class PlaybackController:
    """Play, pause, seek and tick a timeline.

    Example:
        controller = PlaybackController(config, on_frame=show_frame)
        controller.play()

        # Either drive it from an existing loop:
        frame = controller.tick()

        # or let a background thread do it:
        controller.start_ticking()
    """

    def __init__(
        self,
        config: PlaybackConfig | None = None,
        on_frame: Callable[[int], None] | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize playback controller.

        :param config: Playback configuration (uses defaults if None)
        :param on_frame: Called with each new frame number from ``tick()``
        :param clock: Monotonic clock in seconds
        """
        self.config = config or PlaybackConfig()
        self.config.validate()
        self._on_frame = on_frame
        self._clock = clock
        self._state = PlaybackState.STOPPED

        # Timing
        self._start_frame: int = 1
        self._start_time: float = 0.0
        self._pause_time: float = 0.0
        self._accumulated_pause: float = 0.0
        self._frame: int = 1
        self._last_delivered: int | None = None

        # Ticking; a new generation invalidates every pending tick
        self._lock = threading.RLock()
        self._generation = 0
        self._thread: threading.Thread | None = None
        self._wake: threading.Event | None = None

        # Callbacks
        self._on_state_change: list[Callable[[PlaybackState], None]] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        """Current playback state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        """Whether currently playing."""
        return self._state == PlaybackState.PLAYING

    @property
    def is_paused(self) -> bool:
        """Whether currently paused."""
        return self._state == PlaybackState.PAUSED

    @property
    def is_ticking(self) -> bool:
        """Whether the background ticker is running."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def elapsed_time(self) -> float:
        """Seconds played since the last start or seek, pauses excluded."""
        if self._state == PlaybackState.STOPPED:
            return 0.0
        if self._state == PlaybackState.PAUSED:
            return self._pause_time - self._start_time - self._accumulated_pause
        return self._clock() - self._start_time - self._accumulated_pause

    @property
    def current_frame(self) -> int:
        """Frame shown now (1-based)."""
        if self._state != PlaybackState.PLAYING:
            return self._frame
        return self._wrap(self._position())

    # -------------------------------------------------------------------------
    # Playback Control
    # -------------------------------------------------------------------------

    def play(self) -> None:
        """Start or resume playback."""
        with self._lock:
            now = self._clock()
            if self._state == PlaybackState.STOPPED:
                if not self.config.loop and self._frame >= self.config.total_frames:
                    self._frame = 1
                self._restart_at(self._frame, now)
            elif self._state == PlaybackState.PAUSED:
                self._accumulated_pause += now - self._pause_time
            self._set_state(PlaybackState.PLAYING)

    def pause(self) -> None:
        """Pause playback, keeping the current frame."""
        with self._lock:
            if self._state == PlaybackState.PLAYING:
                self._pause_time = self._clock()
                self._set_state(PlaybackState.PAUSED)
                self._frame = self._wrap(self._position())

    def toggle(self) -> None:
        """Toggle between play and pause."""
        if self._state == PlaybackState.PLAYING:
            self.pause()
        else:
            self.play()

    def stop(self) -> None:
        """Stop playback, cancel ticking and rewind to frame 1."""
        with self._lock:
            self._cancel_ticking()
            self._frame = 1
            self._last_delivered = None
            self._set_state(PlaybackState.STOPPED)
        self._join_ticker()

    def seek(self, frame: int) -> int:
        """Jump to a frame (clamped to the timeline) and deliver it.

        :return: The frame jumped to
        """
        with self._lock:
            frame = max(1, min(int(frame), self.config.total_frames))
            now = self._clock()
            self._restart_at(frame, now)
            self._frame = frame
            self._deliver(frame)
            return frame

    # -------------------------------------------------------------------------
    # Ticking
    # -------------------------------------------------------------------------

    def tick(self, generation: int | None = None) -> int | None:
        """Advance to the frame for the current time.

        Delivers the frame to ``on_frame`` when it changed. Non-looping
        playback stops on the last frame.

        :param generation: Generation the caller was started for; stale
            generations are ignored
        :return: Current frame, or None if not playing or stale
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                return None
            if self._state != PlaybackState.PLAYING:
                return None

            position = self._position()
            frame = self._wrap(position)
            self._frame = frame
            finished = not self.config.loop and position >= self.config.total_frames - 1
            if finished:
                self._cancel_ticking()
                self._set_state(PlaybackState.STOPPED)
            self._deliver(frame)
            return frame

    def start_ticking(self) -> None:
        """Run ``tick()`` on a daemon thread until playback stops."""
        with self._lock:
            if self.is_ticking:
                return
            wake = threading.Event()
            self._wake = wake
            self._thread = threading.Thread(
                target=self._tick_loop,
                args=(self._generation, wake),
                daemon=True,
                name="tweenstag-playback",
            )
            self._thread.start()

    def _tick_loop(self, generation: int, wake: threading.Event) -> None:
        interval = self.config.interval
        while generation == self._generation:
            self.tick(generation)
            if wake.wait(interval):
                break
        logger.debug(f"Playback ticker generation {generation} finished")

    def _cancel_ticking(self) -> None:
        self._generation += 1
        if self._wake is not None:
            self._wake.set()

    def _join_ticker(self) -> None:
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)
        self._thread = None

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _restart_at(self, frame: int, now: float) -> None:
        self._start_frame = frame
        self._start_time = now
        self._pause_time = now
        self._accumulated_pause = 0.0
        self._last_delivered = None

    def _position(self) -> float:
        """Zero-based, unwrapped frame position."""
        return (self._start_frame - 1) + self.elapsed_time * self.config.frame_rate

    def _wrap(self, position: float) -> int:
        index = int(math.floor(position + 1e-9))
        total = self.config.total_frames
        if self.config.loop:
            return index % total + 1
        return min(index, total - 1) + 1

    def _deliver(self, frame: int) -> None:
        if frame == self._last_delivered:
            return
        self._last_delivered = frame
        if self._on_frame is not None:
            self._on_frame(frame)

    # -------------------------------------------------------------------------
    # Callbacks
    # -------------------------------------------------------------------------

    def on_state_change(self, callback: Callable[[PlaybackState], None]) -> None:
        """Register a callback for state changes."""
        self._on_state_change.append(callback)

    def _set_state(self, state: PlaybackState) -> None:
        """Set state and notify callbacks."""
        old_state = self._state
        self._state = state
        if old_state != state:
            for callback in self._on_state_change:
                callback(state)
