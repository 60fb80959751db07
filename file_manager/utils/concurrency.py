"""Helpers for running blocking filesystem calls off the event loop."""

import asyncio
import functools
import threading
from concurrent.futures import Executor, Future
from typing import Callable, TypeVar

T = TypeVar("T")


class DaemonThreadExecutor(Executor):
    """
    Run each submitted call on its own daemon thread.

    Nothing ever joins these threads, so a call stuck on I/O (a FIFO with no
    writer, a hung network mount) cannot keep the process alive once the
    session has ended.
    """

    def __init__(self, name_prefix: str = "file-manager-io"):
        self._name_prefix = name_prefix
        self._counter = 0
        self._lock = threading.Lock()
        self._shutdown = False

    def submit(self, fn, /, *args, **kwargs) -> Future:
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new calls after shutdown")
            self._counter += 1
            name = f"{self._name_prefix}-{self._counter}"

        future: Future = Future()

        def work() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as e:
                future.set_exception(e)
            else:
                future.set_result(result)

        threading.Thread(target=work, name=name, daemon=True).start()
        return future

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        # running calls are abandoned, never joined
        with self._lock:
            self._shutdown = True


_executor = DaemonThreadExecutor()


async def run_blocking(func: Callable[..., T], *args, **kwargs) -> T:
    """Run ``func`` on a daemon thread and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor, functools.partial(func, *args, **kwargs))
