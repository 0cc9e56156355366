import abc


class StepRunner(metaclass=abc.ABCMeta):
    """
    An interface for services that execute job steps.
    """

    @abc.abstractmethod
    def run_step(self, step: str) -> None:
        """
        Execute the given step and block until it completes. The step output is passed through to the user.

        :param step: command line of the step, with all the placeholders already substituted
        :raise InvalidStepError: the step does not name a program to run
        :raise StepFailedError: the step exited with a non-zero status code or was terminated by a signal
        """
