"""Model package for edbootstrap."""

from edbootstrap.models.bootstrap_variant import BootstrapVariant
from edbootstrap.models.launch_request import LaunchRequest
from edbootstrap.models.launch_strategy import LaunchStrategy

__all__ = [
    "BootstrapVariant",
    "LaunchRequest",
    "LaunchStrategy",
]
