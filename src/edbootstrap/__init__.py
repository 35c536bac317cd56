"""Bootstrap executables that hand off to the Elite Dangerous launchers."""

__version__ = "0.1.0"
