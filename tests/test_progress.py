import io
import threading

import pytest

from octane.progress import BAR_LENGTH, ProgressBar, simulate_progress


def _frames(text):
    return [frame for frame in text.split("\r") if frame]


def test_rejects_non_positive_total():
    with pytest.raises(ValueError):
        ProgressBar(0)
    with pytest.raises(ValueError):
        ProgressBar(-3)


def test_increment_counts_and_reports_percentage():
    buf = io.StringIO()
    bar = ProgressBar(4, stream=buf)
    bar.increment()
    assert bar.current == 1
    assert buf.getvalue().endswith("25.00%")
    assert "Done!" not in buf.getvalue()


def test_done_printed_when_complete():
    buf = io.StringIO()
    bar = ProgressBar(2, stream=buf)
    bar.increment()
    bar.increment()
    assert buf.getvalue().endswith("\nDone!\n")
    assert "100.00%" in buf.getvalue()


def test_bar_width_constant_and_fill_grows():
    buf = io.StringIO()
    bar = ProgressBar(5, stream=buf)
    for _ in range(5):
        bar.increment()
    frames = _frames(buf.getvalue().replace("\nDone!\n", ""))
    assert len(frames) == 5
    fills = []
    for frame in frames:
        inner = frame[frame.index("[") + 1 : frame.index("]")]
        assert len(inner) == BAR_LENGTH
        fills.append(inner.count("█"))
    assert fills == sorted(fills)
    assert fills[-1] == BAR_LENGTH


def test_overshoot_keeps_bar_width():
    buf = io.StringIO()
    bar = ProgressBar(1, stream=buf)
    bar.increment()
    bar.increment()
    last = _frames(buf.getvalue())[-1]
    inner = last[last.index("[") + 1 : last.index("]")]
    assert len(inner) == BAR_LENGTH


def test_simulate_progress_reaches_total():
    buf = io.StringIO()
    bar = ProgressBar(3, stream=buf)
    simulate_progress(bar, delay=0)
    assert bar.current == bar.total
    assert buf.getvalue().count("Done!") == 1


def test_concurrent_increments_are_counted():
    bar = ProgressBar(200, stream=io.StringIO())
    threads = [threading.Thread(target=lambda: [bar.increment() for _ in range(50)]) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert bar.current == 200