import io
import time

import pytest

from flagbind import Spinner
from flagbind._spinner import CLEAR_LINE, CURSOR_LEFT, FRAMES


def wait_for_frames(spinner: Spinner, count: int) -> None:
    deadline = time.monotonic() + 5.0
    while spinner.frame_count < count and time.monotonic() < deadline:
        time.sleep(0.005)


def test_spinner_draws_frames_until_stopped() -> None:
    target = io.StringIO()
    spinner = Spinner("loading", stream=target, interval=0.001).start()
    assert spinner.running
    wait_for_frames(spinner, 7)
    spinner.stop()

    assert not spinner.running
    output = target.getvalue()
    assert output.startswith("loading|")
    assert output.endswith(CLEAR_LINE)
    assert spinner.frame_count >= 7

    # Frames cycle, each drawn over the previous one.
    body = output[len("loading|") : -len(CLEAR_LINE)]
    drawn = body.split(CURSOR_LEFT)[1:]
    assert drawn == [FRAMES[i % len(FRAMES)] for i in range(len(drawn))]


def test_stop_is_idempotent() -> None:
    spinner = Spinner(stream=io.StringIO(), interval=0.001)
    spinner.stop()
    spinner.start()
    spinner.stop()
    spinner.stop()
    assert not spinner.running


def test_start_once() -> None:
    spinner = Spinner(stream=io.StringIO(), interval=0.001).start()
    with pytest.raises(RuntimeError):
        spinner.start()
    spinner.stop()


def test_context_manager() -> None:
    target = io.StringIO()
    with Spinner("working", stream=target, interval=0.001) as spinner:
        assert spinner.running
    assert not spinner.running
    assert target.getvalue().endswith(CLEAR_LINE)


def test_default_interval_from_settings() -> None:
    import flagbind

    flagbind._settings.options["spinner_interval"] = 0.25
    assert Spinner().interval == 0.25
