from typing import Optional

from .base import FerryError


__all__ = ['InvalidStepError', 'StepFailedError']


class InvalidStepError(FerryError):
    """Exception raised when a step does not contain a program to run."""

    def __init__(self, step: str):
        super().__init__('Step `{}` is invalid, it does not name a program to run'.format(step))
        self.step = step


class StepFailedError(FerryError):
    """Exception raised when a step exits with a non-zero status code or is terminated by a signal."""

    def __init__(self, step: str, return_code: Optional[int] = None, signal: Optional[int] = None):
        """
        Initialize new :py:class:`StepFailedError`.

        :param step: the failed step
        :param return_code: step exit status, ``None`` if the step did not exit on its own
        :param signal: number of the signal that terminated the step, if known
        """
        if return_code is not None:
            message = 'Step `{}` exited with a non-zero status code {}'.format(step, return_code)
        elif signal is not None:
            message = 'Step `{}` was terminated by signal {}'.format(step, signal)
        else:
            message = 'Step `{}` was terminated by a signal'.format(step)
        super().__init__(message)
        self.step = step
        self.return_code = return_code
        self.signal = signal
