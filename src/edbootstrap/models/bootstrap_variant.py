"""Deployment variant model for a bootstrap executable."""

from pydantic import BaseModel, ConfigDict

from edbootstrap.models.launch_strategy import LaunchStrategy


class BootstrapVariant(BaseModel):
    """Fixed launch settings baked into one bootstrap executable."""

    model_config = ConfigDict(frozen=True)

    name: str
    target: str
    strategy: LaunchStrategy
    wait: bool
    new_console: bool
    # Relative to the local application data directory.
    error_log: str | None = None
