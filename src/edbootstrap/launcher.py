"""Build, issue and optionally wait on a launch request."""

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Iterable

from edbootstrap.errors import LaunchError
from edbootstrap.models import BootstrapVariant, LaunchRequest, LaunchStrategy

log = logging.getLogger("edbootstrap")

# Win32 process creation flag; not exposed by subprocess off Windows.
CREATE_NO_WINDOW = 0x08000000
SW_SHOWNORMAL = 1


def _is_windows() -> bool:
    return os.name == "nt"


def _bootstrap_dir() -> str:
    """Return the directory the running bootstrap lives in.

    Under ``python -m edbootstrap`` argv[0] is the package's ``__main__.py``,
    so the interpreter's directory (where console scripts live) is used.
    """
    script = os.path.abspath(sys.argv[0])
    if os.path.basename(script) == "__main__.py":
        return os.path.dirname(os.path.abspath(sys.executable))
    return os.path.dirname(script)


def resolve_target(name: str, search_dir: str | None = None) -> str:
    """Resolve ``name`` next to the bootstrap first, then on PATH.

    Falls back to the bare name so the OS launch call reports a missing target.
    """
    directory = _bootstrap_dir() if search_dir is None else search_dir
    sibling = os.path.join(directory, name)
    if os.path.isfile(sibling) and os.access(sibling, os.X_OK):
        return sibling
    return shutil.which(name) or name


def build_request(
    variant: BootstrapVariant, args: Iterable[str], search_dir: str | None = None
) -> LaunchRequest:
    """Turn a variant and the bootstrap's own arguments into a launch request."""
    return LaunchRequest(
        target=resolve_target(variant.target, search_dir),
        args=tuple(args),
        strategy=variant.strategy,
        wait=variant.wait,
        new_console=variant.new_console,
    )


def _launch_direct(request: LaunchRequest) -> subprocess.Popen:
    creationflags = 0
    if _is_windows() and not request.new_console:
        creationflags = CREATE_NO_WINDOW
    return subprocess.Popen(request.argv, creationflags=creationflags)


def _launch_shell(request: LaunchRequest) -> subprocess.Popen | None:
    if _is_windows():
        os.startfile(
            request.target,
            "open",
            arguments=request.argument_string,
            show_cmd=SW_SHOWNORMAL,
        )
        return None

    # No shell association on POSIX: split the payload on whitespace like a
    # Windows parameter string, with no expansion, and detach the child.
    argv = [request.target, *request.argument_string.split()]
    return subprocess.Popen(argv, start_new_session=True)


def launch(request: LaunchRequest) -> subprocess.Popen | None:
    """Ask the OS to start the target. Returns a process handle when one exists."""
    log.debug(
        "strategy=%s target=%s arguments=%r",
        request.strategy.value,
        request.target,
        request.argument_string,
    )
    try:
        if request.strategy is LaunchStrategy.SHELL:
            return _launch_shell(request)
        return _launch_direct(request)
    except OSError as e:
        raise LaunchError(request.target, e.strerror or str(e)) from e


def run(request: LaunchRequest) -> int:
    """Launch the target and, if requested, block until it exits.

    The child's exit status is never propagated; a launch that was issued
    always yields 0.
    """
    process = launch(request)
    if request.wait and process is not None:
        returncode = process.wait()
        log.debug("%s exited with %s", request.target, returncode)
    return 0
