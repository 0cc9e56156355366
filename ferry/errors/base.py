__all__ = ['FerryError', 'LocalIOError']


class FerryError(Exception):
    """Base class of all the errors raised by ferry."""


class LocalIOError(FerryError):
    """Exception raised when a local filesystem operation (or spawning a process) fails."""
