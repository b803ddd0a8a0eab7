"""A single repeating timer running on a daemon thread."""

from __future__ import annotations

import threading
from collections.abc import Callable

from ..utils.logging import get_logger

logger = get_logger(__name__)


class RepeatingTimer:
    """Call ``tick`` every ``interval()`` seconds until cancelled.

    ``interval`` is re-evaluated before every wait, so pacing changes apply
    from the next word on.  When ``tick`` returns ``False`` the timer stops by
    itself.  Exceptions raised by ``tick`` stop the timer and are logged; they
    are kept on :attr:`error` for the owner to inspect.
    """

    def __init__(
        self,
        tick: Callable[[], bool],
        interval: Callable[[], float],
        *,
        name: str = "oneword-playback",
    ) -> None:
        self._tick = tick
        self._interval = interval
        self._name = name
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.error: BaseException | None = None

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None and self._thread.is_alive() and not self._stop.is_set()
        )

    def start(self) -> None:
        if self.is_running:
            return
        self._stop = threading.Event()
        self.error = None
        self._thread = threading.Thread(
            target=self._run, args=(self._stop,), name=self._name, daemon=True
        )
        self._thread.start()

    def cancel(self) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def restart(self) -> None:
        self.cancel()
        self.start()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the timer thread; return ``True`` once it has finished."""

        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _run(self, stop: threading.Event) -> None:
        while not stop.wait(self._interval()):
            try:
                keep_going = self._tick()
            except Exception as exc:
                logger.exception("Playback tick failed")
                self.error = exc
                break
            if not keep_going:
                break
        stop.set()


__all__ = ["RepeatingTimer"]
