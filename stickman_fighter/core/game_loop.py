"""
Game Loop
=========
Frame scheduler that calls advance(delta_ms, ...) once per frame while
running. It does not know about rendering; the host drives tick() from
whatever frame source it has (pygame clock, tests, ...).
"""

from typing import Callable, Optional

from stickman_fighter.config import FPS


class GameLoop:
    """
    Start/stop wrapper around an advance callback.

    Every start() and stop() bumps a generation counter. A frame token
    obtained from request_frame() is only honored while its generation
    is current, so frames scheduled before a stop are voided.
    """

    def __init__(self, advance: Callable[..., None], fps: int = FPS):
        self._advance = advance
        self.fps = fps
        self.running = False
        self.frame_count = 0

        self._generation = 0
        self._last_time: Optional[float] = None

    @property
    def frame_interval_ms(self) -> float:
        return 1000.0 / self.fps

    def start(self):
        """Begin ticking; the first tick after start has zero delta"""
        self.running = True
        self._generation += 1
        self._last_time = None

    def stop(self):
        """Stop ticking and void any outstanding frame tokens"""
        self.running = False
        self._generation += 1
        self._last_time = None

    def cancel(self):
        """Void outstanding frame tokens without stopping"""
        self._generation += 1

    def request_frame(self) -> Optional[int]:
        """Token for the next frame, or None when stopped"""
        if not self.running:
            return None
        return self._generation

    def tick(self, now_ms: float, *args, token: Optional[int] = None) -> bool:
        """
        Advance one frame at host time now_ms.
        Returns False if the loop is stopped or the token is stale.
        """
        if not self.running:
            return False
        if token is not None and token != self._generation:
            return False

        delta_ms = 0.0 if self._last_time is None else max(0.0, now_ms - self._last_time)
        self._last_time = now_ms
        self.frame_count += 1

        self._advance(delta_ms, *args)
        return True
