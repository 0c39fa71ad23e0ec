"""Running an external program against matched files."""

import logging
import os
import signal
import subprocess
import sys

from .errors import ChildSignaled, SpawnFailure
from .models import Invocation, InvocationResult

logger = logging.getLogger(__name__)


def _signal_name(number: int) -> str | None:
    try:
        return signal.Signals(number).name
    except ValueError:
        return None


class CommandInvoker:
    """Spawns ``executable file_path`` and waits for it to finish.

    The child inherits this process's environment and standard streams.
    A non-zero exit status is reported back but is not an error: the
    invocation itself succeeded. Only a failed spawn or a child killed by
    a signal raise.

    The program path is used as given, never looked up on PATH: a relative
    path is resolved against the current directory, as exec would.
    """

    def invoke(self, executable: str, file_path: str) -> InvocationResult:
        """Run one invocation synchronously."""
        invocation = Invocation(executable=executable, file_path=file_path)
        # Keep our output ordered before the child's.
        sys.stdout.flush()
        sys.stderr.flush()

        logger.info(f"Running {invocation.argv}")
        try:
            completed = subprocess.run(
                invocation.argv, executable=os.path.abspath(executable), check=False
            )
        except OSError as e:
            raise SpawnFailure(executable, file_path, e.strerror or str(e)) from e

        if completed.returncode < 0:
            number = -completed.returncode
            raise ChildSignaled(executable, file_path, number, _signal_name(number))

        if completed.returncode != 0:
            logger.info(
                f"{executable} exited with status {completed.returncode} for {file_path}"
            )
        return InvocationResult(invocation=invocation, returncode=completed.returncode)
