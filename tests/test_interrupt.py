import os
import selectors
import signal
import subprocess
import sys
import time
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")


def spawn(*args):
    env = dict(os.environ, HELLO_CLI_LOG_DELAY="0", PYTHONPATH=str(ROOT), PYTHONUNBUFFERED="1")
    return subprocess.Popen(
        [sys.executable, "-m", "hello_cli", *args],
        cwd=ROOT,
        env=env,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )


def wait_for(proc, text, timeout=15.0):
    """Read stderr until TEXT shows up; return everything read so far."""
    seen = b""
    deadline = time.monotonic() + timeout
    with selectors.DefaultSelector() as selector:
        selector.register(proc.stderr, selectors.EVENT_READ)
        while text.encode() not in seen:
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not selector.select(remaining):
                proc.kill()
                pytest.fail(f"timed out waiting for {text!r}; stderr so far: {seen!r}")
            chunk = os.read(proc.stderr.fileno(), 4096)
            if not chunk:
                pytest.fail(f"process exited before {text!r}; stderr: {seen!r}")
            seen += chunk
    return seen


@pytest.mark.parametrize(
    "args,prompt",
    [
        ([""], "What is your name?"),
        (["Alice"], "Choose a language"),
    ],
)
def test_ctrl_c_at_prompt_cancels(args, prompt):
    proc = spawn(*args)
    wait_for(proc, prompt)
    proc.send_signal(signal.SIGINT)
    stdout, stderr = proc.communicate(timeout=15)
    assert proc.returncode == 2
    assert stdout == b""
    assert b"Processing greeting" not in stderr
