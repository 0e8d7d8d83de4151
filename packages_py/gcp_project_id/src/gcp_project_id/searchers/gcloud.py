"""
gcloud CLI searcher.

On a developer machine the gcloud configuration is often the only place a
default project is recorded. Any failure to run gcloud (missing binary,
non-zero exit, timeout) just moves on to the next candidate executable.
"""
import logging
import os
import shutil
import subprocess
from typing import List, Optional, Sequence, Tuple

from ..config import GCLOUD_ARGS, GCLOUD_EXECUTABLE
from ..context import SearchContext
from ..types import OutputFn

logger = logging.getLogger(__name__)


# How often a running command re-checks the context (seconds)
POLL_INTERVAL_SECONDS = 0.1


def common_gcloud_paths() -> List[str]:
    """
    Candidate gcloud executables, in the order they are tried.

    1. Whatever PATH lookup finds ("" when nothing is found)
    2. The bare name, resolved again at launch
    3. The default SDK install location under the home directory
    """
    found = shutil.which(GCLOUD_EXECUTABLE) or ""
    home = os.path.expanduser("~")
    return [
        found,
        GCLOUD_EXECUTABLE,
        os.path.join(home, "google-cloud-sdk", "bin", GCLOUD_EXECUTABLE),
    ]


def _poll_timeout(ctx: SearchContext) -> float:
    remaining = ctx.remaining()
    if remaining is None:
        return POLL_INTERVAL_SECONDS
    return min(POLL_INTERVAL_SECONDS, remaining)


def command_output(ctx: SearchContext, argv: Sequence[str]) -> bytes:
    """
    Run a command and return its standard output.

    The process is killed as soon as the context is cancelled or its deadline
    passes. Standard error is discarded.

    Args:
        ctx: Search context bounding the command
        argv: Executable followed by its arguments

    Returns:
        Captured standard output

    Raises:
        SearchContextError: If the context is done before or during the run
        OSError: If the executable cannot be started
        subprocess.CalledProcessError: If the command exits non-zero
    """
    ctx.raise_if_done()
    argv = list(argv)

    process = subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
    )
    try:
        while True:
            try:
                stdout, _ = process.communicate(timeout=_poll_timeout(ctx))
                break
            except subprocess.TimeoutExpired:
                err = ctx.err()
                if err is not None:
                    logger.debug(f"command_output: Killing {argv[0]!r}: {err}")
                    process.kill()
                    process.communicate()
                    raise err from None
    except BaseException:
        process.kill()
        process.wait()
        raise

    if process.returncode != 0:
        raise subprocess.CalledProcessError(process.returncode, argv, output=stdout)
    return stdout


class GCloudSearcher:
    """Ask `gcloud config get-value project` for the configured project."""

    def __init__(
        self,
        executables: Optional[Sequence[str]] = None,
        output: OutputFn = command_output,
    ):
        if executables is None:
            executables = common_gcloud_paths()
        self._executables: Tuple[str, ...] = tuple(executables)
        self._output = output

    @property
    def executables(self) -> Tuple[str, ...]:
        return self._executables

    def project_id(self, ctx: SearchContext, scopes: Sequence[str] = ()) -> str:
        for executable in self._executables:
            try:
                raw = self._output(ctx, [executable, *GCLOUD_ARGS])
            except Exception as e:
                logger.debug(f"GCloudSearcher: {executable!r} failed, trying next: {e}")
                continue

            project_id = raw.decode("utf-8", errors="replace").strip()
            if project_id:
                logger.debug(f"GCloudSearcher: Found project ID via {executable!r}")
                return project_id
            logger.debug(f"GCloudSearcher: {executable!r} printed no project")

        return ""
