"""Bridge between the synchronous publisher and async transports"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Coroutine, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run a transport coroutine to completion from synchronous code

    When called while an event loop is already running (for example from a
    notebook or an async caller), the coroutine gets its own loop on a
    worker thread and this call blocks until it finishes.

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result; exceptions raised by the coroutine propagate
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="publish-tool") as executor:
        return executor.submit(asyncio.run, coro).result()
