import asyncio
from typing import Iterable, List, Optional


async def cancel_tasks_with_timeout(
    tasks: List[Optional[asyncio.Task]],
    timeout: float = 2.0,
    logger=None
) -> bool:
    """
    Cancel multiple tasks with timeout protection.

    Args:
        tasks: List of asyncio tasks (None entries are ignored)
        timeout: Maximum time to wait for cancellation
        logger: Optional logger for timeout warnings

    Returns:
        bool: True if all tasks cancelled within timeout, False if timeout occurred
    """
    active_tasks = [task for task in tasks or [] if task and not task.done()]
    if not active_tasks:
        return True

    for task in active_tasks:
        task.cancel()

    try:
        await asyncio.wait_for(
            asyncio.gather(*active_tasks, return_exceptions=True),
            timeout=timeout
        )
        return True
    except asyncio.TimeoutError:
        if logger:
            remaining = [task for task in active_tasks if not task.done()]
            logger.warning(f"Task cancellation timed out after {timeout}s", remaining=len(remaining))
        return False


async def race_tasks(tasks: Iterable[asyncio.Task], timeout: float = 2.0, logger=None) -> asyncio.Task:
    """
    Wait until the first task finishes, cancel the rest and return the finished one.

    The caller decides what the winner's result or exception means. If several
    tasks finish in the same iteration the first one in ``tasks`` order wins.
    """
    tasks = list(tasks)
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        await cancel_tasks_with_timeout(tasks, timeout, logger)
        raise

    winner = next(task for task in tasks if task in done)
    await cancel_tasks_with_timeout(list(pending), timeout, logger)
    return winner


async def safe_close_connection(
    connection,
    timeout: float = 1.0,
    logger=None
) -> bool:
    """
    Close a connection with timeout protection.

    Returns:
        bool: True if closed within timeout, False otherwise
    """
    if not connection:
        return True

    try:
        await asyncio.wait_for(connection.close(), timeout=timeout)
        return True
    except asyncio.TimeoutError:
        if logger:
            logger.warning(f"Connection close timed out after {timeout}s")
        return False
    except Exception as e:
        if logger:
            logger.error(f"Error closing connection: {e}")
        return False
