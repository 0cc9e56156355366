import sys
import logging
from typing import Optional

import click
import yaml
from schematics.exceptions import DataError

from .config import load_ferry_config
from .constants import LOG_FORMAT, LOG_DATE_FORMAT
from .errors import FerryError
from .ferry import Ferry
from .utils.status import print_error


@click.command()
@click.option("-c", "--config", "config_file", required=True, type=click.Path(dir_okay=False),
              help="Path to a configuration file")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug messages")
@click.argument("job_name", required=False)
def run(config_file: str, verbose: bool, job_name: Optional[str]) -> None:
    """
    Download files from a storage bucket in the cloud, run the steps of a job on them and upload the results back
    to the cloud.

    Runs the job ``JOB_NAME`` from the given ``config_file``, or all the configured jobs if no name is given.

    :param config_file: ferry config file
    :param verbose: log debug messages regardless of the configured level
    :param job_name: optional name of the job to run
    """
    # load ferry configuration
    try:
        with open(config_file, "r") as config_stream:
            config = load_ferry_config(config_stream)
    except (OSError, ValueError, yaml.YAMLError, DataError) as error:
        print_error(FerryError('Failed to load config file `{}`: {}'.format(config_file, error)))
        sys.exit(1)

    # set-up logging
    logging.basicConfig(level=logging.DEBUG if verbose else config.logging.log_level,
                        format=LOG_FORMAT,
                        datefmt=LOG_DATE_FORMAT)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)

    ferry = Ferry(config)
    try:
        if job_name is not None:
            ferry.run_one(job_name)
        else:
            ferry.run_all()
    except FerryError as error:
        logging.debug('Job failed', exc_info=error)
        print_error(error)
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Interrupt caught, stopping")
        sys.exit(130)


if __name__ == "__main__":
    run()  # pragma: no cover
