import asyncio

import pytest

from seocheck.client.progress import HOLD_PERCENT, ProgressController


async def _wait_for(predicate, timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached")
        await asyncio.sleep(0.005)


@pytest.mark.asyncio
async def test_ramp_holds_at_ninety():
    ticks = []
    progress = ProgressController(ticks.append, total_ms=45)

    progress.start()
    await _wait_for(lambda: progress.percent == HOLD_PERCENT)
    await asyncio.sleep(0.05)

    assert ticks[0] == 0
    assert max(ticks) == HOLD_PERCENT
    assert ticks == sorted(ticks)
    assert all(b - a == 2 for a, b in zip(ticks, ticks[1:]))
    assert not progress.active


@pytest.mark.asyncio
async def test_restart_resets_and_keeps_single_ramp():
    ticks = []
    progress = ProgressController(ticks.append, total_ms=450)

    progress.start()
    await _wait_for(lambda: progress.percent >= 10)
    progress.start()

    assert progress.percent == 0
    assert ticks[-1] == 0

    ticks.clear()
    await _wait_for(lambda: progress.percent >= 20)
    progress.stop()

    # A second parallel timer would produce repeated or skipped values.
    assert ticks == list(range(2, ticks[-1] + 1, 2))


@pytest.mark.asyncio
async def test_stop_freezes_progress():
    progress = ProgressController(total_ms=450)

    progress.start()
    await _wait_for(lambda: progress.percent >= 4)
    progress.stop()
    frozen = progress.percent
    await asyncio.sleep(0.05)

    assert progress.percent == frozen
    assert not progress.active
