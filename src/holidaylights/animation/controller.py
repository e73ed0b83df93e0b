"""Frame clock with wraparound and subscriber notification."""

import asyncio
import logging
from typing import AsyncIterator, Callable, List, Optional

logger = logging.getLogger(__name__)

FrameCallback = Callable[[int], None]

DEFAULT_INTERVAL_MS = 100
DEFAULT_MAX_FRAMES = 100


class AnimationController:
    """Drives a frame counter that wraps at `max_frames`.

    Stopped until `start` is called inside a running event loop. Each
    tick advances the frame by one (mod max_frames) and notifies every
    subscriber with the new frame number. `start` while running and
    `stop` while stopped are no-ops; stopping keeps the current frame so
    a later `start` resumes from it.
    """

    def __init__(self) -> None:
        self._frame = 0
        self._interval_ms = DEFAULT_INTERVAL_MS
        self._max_frames = DEFAULT_MAX_FRAMES
        self._task: Optional[asyncio.Task] = None
        self._subscribers: List[FrameCallback] = []

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def max_frames(self) -> int:
        return self._max_frames

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def subscribe(self, callback: FrameCallback) -> Callable[[], None]:
        """
        Register a frame callback.

        Subscribing the same callback again has no effect.

        Returns:
            Unsubscribe function
        """
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def start(
        self,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        max_frames: int = DEFAULT_MAX_FRAMES,
    ) -> None:
        """Begin ticking every `interval_ms`. Requires a running event loop."""
        if self.is_running:
            return
        if interval_ms <= 0 or max_frames <= 0:
            raise ValueError(f"interval_ms and max_frames must be positive (got {interval_ms}, {max_frames})")

        self._interval_ms = interval_ms
        self._max_frames = max_frames
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Animation started: {interval_ms}ms x {max_frames} frames at frame {self._frame}")

    def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.debug(f"Animation stopped at frame {self._frame}")

    def reset(self) -> None:
        """Jump to frame 0 and notify, without changing run state."""
        self._frame = 0
        self._notify()

    def destroy(self) -> None:
        """Stop and drop every subscriber."""
        self.stop()
        self._subscribers.clear()

    def advance(self) -> int:
        """Perform one tick and return the new frame."""
        self._frame = (self._frame + 1) % self._max_frames
        self._notify()
        return self._frame

    async def ticks(
        self,
        interval_ms: Optional[int] = None,
        max_frames: Optional[int] = None,
    ) -> AsyncIterator[int]:
        """Yield each new frame, one per interval.

        The sequence is lazy: nothing advances until it is iterated, and
        closing the generator ends it. Subscribers are notified as usual.
        """
        if interval_ms is not None:
            self._interval_ms = interval_ms
        if max_frames is not None:
            self._max_frames = max_frames

        while True:
            await asyncio.sleep(self._interval_ms / 1000)
            yield self.advance()

    async def _run(self) -> None:
        ticks = self.ticks()
        try:
            async for _ in ticks:
                pass
        finally:
            await ticks.aclose()

    def _notify(self) -> None:
        frame = self._frame
        for callback in list(self._subscribers):
            try:
                callback(frame)
            except Exception:
                logger.exception(f"Frame subscriber failed at frame {frame}")
