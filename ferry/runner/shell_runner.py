import logging
import subprocess

from .step_runner import StepRunner
from ..errors import InvalidStepError, StepFailedError, LocalIOError


class ShellStepRunner(StepRunner):
    """
    Runs each step as a child process, with its stdout and stderr connected to ours.

    The step is split on whitespace into the program name and its arguments; shell quoting is not supported,
    so arguments cannot contain whitespace. There is no timeout, a step which never exits blocks forever.
    """

    def run_step(self, step: str) -> None:
        """
        Implementation of :py:meth:`ferry.runner.StepRunner.run_step`.
        """
        command = step.split()
        if len(command) == 0:
            raise InvalidStepError(step)

        logging.debug('Running command `%s`', ' '.join(command))
        try:
            process = subprocess.Popen(command)
        except OSError as error:
            raise LocalIOError('Failed to start step `{}`'.format(step)) from error

        try:
            return_code = process.wait()
        except BaseException:
            logging.warning('Interrupted while waiting for step `%s`, killing it', step)
            process.kill()
            process.wait()
            raise

        if return_code == 0:
            return
        if return_code < 0:
            raise StepFailedError(step, signal=-return_code)
        raise StepFailedError(step, return_code=return_code)
