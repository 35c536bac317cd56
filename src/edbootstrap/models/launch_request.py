"""Process launch request model."""

from pydantic import BaseModel, ConfigDict

from edbootstrap.models.launch_strategy import LaunchStrategy


class LaunchRequest(BaseModel):
    """A single request to start the target executable."""

    model_config = ConfigDict(frozen=True)

    target: str
    args: tuple[str, ...] = ()
    strategy: LaunchStrategy = LaunchStrategy.DIRECT
    wait: bool = False
    new_console: bool = True

    @property
    def argument_string(self) -> str:
        """Arguments joined with single spaces, without any quoting.

        Lossy: ``["bar baz"]`` and ``["bar", "baz"]`` produce the same string.
        """
        return " ".join(self.args)

    @property
    def argv(self) -> list[str]:
        """Argument vector for direct process creation, arguments untouched."""
        return [self.target, *self.args]
