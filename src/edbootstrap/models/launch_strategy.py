"""How a bootstrap asks the OS to start its target."""

from enum import Enum


class LaunchStrategy(str, Enum):
    DIRECT = "direct"
    SHELL = "shell"
