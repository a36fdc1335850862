"""Terminal progress spinner, shown while a long operation runs."""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from . import _settings

FRAMES = ("-", "\\", "|", "/", "-", ".|")

# Move the cursor one column left; overwrite the previous frame.
CURSOR_LEFT = "\033[1D"
# Return to the start of the line and clear it.
CLEAR_LINE = "\r\033[2K"


class Spinner:
    """Background loop that animates the last character of a status line.

    The loop wakes up every `interval` seconds, checks whether it was asked to stop,
    and otherwise draws the next frame. It only ever writes to `stream`. Without a call
    to :meth:`stop`, it runs until the process exits.

    ```python
    spinner = Spinner("loading").start()
    do_work()
    spinner.stop()
    ```
    """

    def __init__(
        self,
        title: str = "",
        stream: Optional[TextIO] = None,
        interval: Optional[float] = None,
    ) -> None:
        self.title = title
        self.interval = (
            interval if interval is not None else _settings.options["spinner_interval"]
        )
        self._stream = stream
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.frame_count = 0

    @property
    def stream(self) -> TextIO:
        # Resolved late so that redirected stdout is respected.
        return self._stream if self._stream is not None else sys.stdout

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> Spinner:
        if self._thread is not None:
            raise RuntimeError("A spinner can only be started once.")
        self._write(f"{self.title}|")
        self._thread = threading.Thread(
            target=self._loop, name="flagbind-spinner", daemon=True
        )
        self._thread.start()
        return self

    def stop(self) -> None:
        """Signal the loop to stop, and wait until it has cleared the line. Calling it
        again, or before :meth:`start`, does nothing."""
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def _loop(self) -> None:
        while not self._stop_event.wait(self.interval):
            self._write(CURSOR_LEFT + FRAMES[self.frame_count % len(FRAMES)])
            self.frame_count += 1
        self._write(CLEAR_LINE)

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def __enter__(self) -> Spinner:
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()
