from .base import FerryError


__all__ = ['JobNotFoundError', 'InvalidPathError']


class JobNotFoundError(FerryError):
    """Exception raised when a job is referenced by a name which is not present in the config file."""

    def __init__(self, job_name: str):
        super().__init__('`{}` not found in the config file'.format(job_name))
        self.job_name = job_name


class InvalidPathError(FerryError):
    """Exception raised when a configured path cannot be represented as a valid path string."""

    def __init__(self, field: str):
        """
        Initialize new :py:class:`InvalidPathError`.

        :param field: the offending job field, e.g. ``local_inputs``
        """
        super().__init__('The `{}` path is not a valid path string on this platform'.format(field))
        self.field = field
