"""Exceptions raised by edbootstrap."""


class BootstrapError(Exception):
    """Base class for bootstrap failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LaunchError(BootstrapError):
    """The OS refused to start the target executable."""

    def __init__(self, target: str, message: str) -> None:
        super().__init__(f"could not start {target}: {message}")
        self.target = target
        self.message = message
