"""
End-to-end tests: the process exits once the session ends, even while an
operation is blocked.
"""

import os
import signal
import subprocess
import sys
import time

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FAREWELL = "Thank you for using File Manager, Tester, goodbye!"

pytestmark = pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs named pipes")


@pytest.fixture
def blocked_source(temp_directory):
    """A FIFO with no writer: copying from it blocks on open."""
    path = os.path.join(temp_directory, "pipe")
    os.mkfifo(path)
    return path


def _spawn(start_dir: str) -> subprocess.Popen:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [PROJECT_ROOT, env.get("PYTHONPATH")]))
    env.pop("FILE_MANAGER_LOG_FILE", None)
    return subprocess.Popen(
        [sys.executable, "-m", "file_manager", "--username=Tester", f"--start-dir={start_dir}"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=start_dir,
        env=env,
    )


def _finish(process: subprocess.Popen) -> str:
    try:
        out, _ = process.communicate(timeout=15)
    except subprocess.TimeoutExpired:
        process.kill()
        process.communicate()
        pytest.fail("process still running after the session ended")
    return out.decode()


class TestProcessExit:
    def test_exit_while_copy_is_blocked(self, temp_directory, blocked_source):
        process = _spawn(temp_directory)
        process.stdin.write(b"copy pipe out.txt\n.exit\n")
        process.stdin.flush()

        out = _finish(process)

        assert process.returncode == 0
        assert out.count(FAREWELL) == 1

    @pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX signals")
    def test_sigint_while_copy_is_blocked(self, temp_directory, blocked_source):
        process = _spawn(temp_directory)
        process.stdin.write(b"copy pipe out.txt\n")
        process.stdin.flush()
        # let the session start and dispatch the copy
        time.sleep(1)

        process.send_signal(signal.SIGINT)
        out = _finish(process)

        assert process.returncode == 0
        assert out.count(FAREWELL) == 1
