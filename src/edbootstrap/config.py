"""Configuration for edbootstrap."""

import logging
import os
from pathlib import Path

from edbootstrap.models import BootstrapVariant, LaunchStrategy

DEBUG_ENV_VAR = "EDBOOTSTRAP_DEBUG"

EDLAUNCHER = BootstrapVariant(
    name="edlauncher",
    target="EdLauncher.exe",
    strategy=LaunchStrategy.DIRECT,
    wait=True,
    new_console=True,
)

MIN_EDLAUNCHER = BootstrapVariant(
    name="min-edlauncher",
    target="MinEdLauncher.exe",
    strategy=LaunchStrategy.SHELL,
    wait=False,
    new_console=False,
    error_log="min-ed-launcher/min-ed-launcher.log",
)


def local_data_dir() -> Path:
    """Return the per-user local application data directory."""
    if os.name == "nt":
        local_app_data = os.environ.get("LOCALAPPDATA", "").strip()
        if local_app_data:
            return Path(local_app_data)
        return Path.home() / "AppData" / "Local"
    xdg_data_home = os.environ.get("XDG_DATA_HOME", "").strip()
    if xdg_data_home:
        return Path(xdg_data_home)
    return Path.home() / ".local" / "share"


def error_log_path(variant: BootstrapVariant) -> Path | None:
    """Return where launch failures for this variant get appended, if anywhere."""
    if variant.error_log is None:
        return None
    return local_data_dir() / variant.error_log


def get_log_level() -> int:
    """Return the logging level requested through the environment."""
    value = os.environ.get(DEBUG_ENV_VAR, "").strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return logging.WARNING
