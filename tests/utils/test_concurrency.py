"""
Tests for running blocking calls off the event loop.
"""

import threading

import pytest

from file_manager.utils.concurrency import DaemonThreadExecutor, run_blocking


class TestDaemonThreadExecutor:
    """Test cases for DaemonThreadExecutor."""

    def test_runs_call_on_daemon_thread(self):
        executor = DaemonThreadExecutor()

        future = executor.submit(lambda: threading.current_thread().daemon)

        assert future.result(timeout=5) is True

    def test_propagates_exceptions(self):
        executor = DaemonThreadExecutor()

        def boom():
            raise OSError("disk on fire")

        future = executor.submit(boom)

        with pytest.raises(OSError, match="disk on fire"):
            future.result(timeout=5)

    def test_shutdown_does_not_wait_for_running_calls(self):
        executor = DaemonThreadExecutor()
        release = threading.Event()
        future = executor.submit(release.wait)

        executor.shutdown(wait=True)

        assert not future.done()
        release.set()
        assert future.result(timeout=5) is True

    def test_rejects_calls_after_shutdown(self):
        executor = DaemonThreadExecutor()
        executor.shutdown()

        with pytest.raises(RuntimeError):
            executor.submit(print)


class TestRunBlocking:
    @pytest.mark.asyncio
    async def test_returns_result(self):
        assert await run_blocking(sum, [1, 2, 3]) == 6

    @pytest.mark.asyncio
    async def test_passes_keyword_arguments(self):
        assert await run_blocking(int, "ff", base=16) == 255

    @pytest.mark.asyncio
    async def test_runs_off_the_loop_thread(self):
        worker = await run_blocking(threading.current_thread)

        assert worker is not threading.main_thread()
        assert worker.daemon
