import logging
from typing import Callable

from ..config import FerryConfig
from ..errors import JobNotFoundError
from ..job import Job
from ..runner import StepRunner, ShellStepRunner
from ..storage import Bucket
from ..storage.factory import create_bucket
from ..utils.status import print_status


class Ferry:
    """
    Runs the configured jobs one after another.
    """

    def __init__(self,
                 config: FerryConfig,
                 bucket_factory: Callable[[Job, FerryConfig], Bucket] = create_bucket,
                 step_runner_factory: Callable[[], StepRunner] = ShellStepRunner):
        """
        Create new :py:class:`Ferry`.

        :param config: ferry configuration with the jobs
        :param bucket_factory: creates the bucket of a job, see :py:func:`ferry.storage.factory.create_bucket`
        :param step_runner_factory: creates the runner for the steps of a job
        """
        self._config = config
        self._bucket_factory = bucket_factory
        self._step_runner_factory = step_runner_factory
        self._jobs_started = 0  # only used for the [i/N] status

    def _get_job(self, job_name: str) -> Job:
        """
        Get the job with the given ``job_name``.

        :param job_name: job name
        :return: job with the given ``job_name``
        :raise JobNotFoundError: if the given ``job_name`` is not in the config
        """
        try:
            return self._config.jobs[job_name]
        except KeyError:
            raise JobNotFoundError(job_name) from None

    def run_one(self, job_name: str) -> None:
        """
        Run the job with the given ``job_name``.

        :param job_name: job name
        :raise JobNotFoundError: if the given ``job_name`` is not in the config
        :raise CredentialsNotFoundError: if the credentials for the job bucket cannot be found
        :raise FerryError: the first error encountered when running the job
        """
        job = self._get_job(job_name)
        bucket = self._bucket_factory(job, self._config)
        step_runner = self._step_runner_factory()

        self._jobs_started += 1
        print_status('[{}/{}]'.format(self._jobs_started, len(self._config.jobs)), 'Running {}...'.format(job_name))
        logging.info('Running job `%s` (bucket `%s`)', job_name, job.bucket_name)
        job.run(bucket, step_runner)
        logging.info('Job `%s` done', job_name)

    def run_all(self) -> None:
        """
        Run all the configured jobs in the config order, stopping at the first failure.

        :raise FerryError: the first error encountered
        """
        for job_name in self._config.jobs:
            self.run_one(job_name)
