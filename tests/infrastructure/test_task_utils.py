import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from utils.task_utils import cancel_tasks_with_timeout, race_tasks, safe_close_connection


async def sleeper(result=None, delay: float = 10.0):
    await asyncio.sleep(delay)
    return result


async def failing(error: Exception):
    await asyncio.sleep(0)
    raise error


class TestRaceTasks:

    @pytest.mark.asyncio
    async def test_first_finisher_wins_and_others_are_cancelled(self):
        slow = asyncio.create_task(sleeper("slow"))
        fast = asyncio.create_task(sleeper("fast", delay=0))

        winner = await race_tasks([slow, fast])

        assert winner is fast
        assert winner.result() == "fast"
        assert slow.cancelled()

    @pytest.mark.asyncio
    async def test_winner_exception_is_left_to_caller(self):
        slow = asyncio.create_task(sleeper())
        broken = asyncio.create_task(failing(ValueError("boom")))

        winner = await race_tasks([slow, broken])

        assert winner is broken
        with pytest.raises(ValueError):
            winner.result()
        assert slow.cancelled()

    @pytest.mark.asyncio
    async def test_list_order_breaks_ties(self):
        first = asyncio.create_task(sleeper("first", delay=0))
        second = asyncio.create_task(sleeper("second", delay=0))
        await asyncio.sleep(0.01)

        assert await race_tasks([second, first]) is second

    @pytest.mark.asyncio
    async def test_cancelling_the_race_cancels_every_task(self):
        tasks = [asyncio.create_task(sleeper()) for _ in range(2)]
        race = asyncio.create_task(race_tasks(tasks))
        await asyncio.sleep(0)

        race.cancel()
        with pytest.raises(asyncio.CancelledError):
            await race

        assert all(task.cancelled() for task in tasks)


class TestCancellation:

    @pytest.mark.asyncio
    async def test_cancel_tasks_skips_done_and_none(self):
        done = asyncio.create_task(sleeper(delay=0))
        await done
        pending = asyncio.create_task(sleeper())

        assert await cancel_tasks_with_timeout([None, done, pending])
        assert pending.cancelled()
        assert not done.cancelled()

    @pytest.mark.asyncio
    async def test_safe_close_connection(self):
        connection = Mock()
        connection.close = AsyncMock()
        assert await safe_close_connection(connection)
        connection.close.assert_awaited_once()

        broken = Mock()
        broken.close = AsyncMock(side_effect=OSError("gone"))
        logger = Mock()
        assert not await safe_close_connection(broken, logger=logger)
        logger.error.assert_called_once()
