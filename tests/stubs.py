import os
import os.path as path
from typing import List, Tuple, Iterable

from ferry.errors import StepFailedError
from ferry.runner import StepRunner
from ferry.storage import Bucket


STUB_FILE_NAME = 'foo.txt'
STUB_FILE_CONTENT = 'Whoever is the owner of the white sedan, you left your lights on.'


class StubBucket(Bucket):
    """
    Bucket which does not talk to any remote storage. Downloading writes a single text file to the local inputs
    directory and uploading does nothing; all the calls are recorded.
    """

    def __init__(self, events: List[Tuple]):
        self.events = events

    def download_inputs(self, path_to_remote_inputs: str, path_to_local_inputs: str) -> None:
        self.events.append(('download', path_to_remote_inputs, path_to_local_inputs))
        os.makedirs(path_to_local_inputs, exist_ok=True)
        with open(path.join(path_to_local_inputs, STUB_FILE_NAME), 'w') as file:
            file.write(STUB_FILE_CONTENT)

    def upload_outputs(self, path_to_local_outputs: str, path_to_remote_outputs: str) -> None:
        self.events.append(('upload', path_to_local_outputs, path_to_remote_outputs))


class RecordingStepRunner(StepRunner):
    """Step runner which only records the steps; steps listed in ``failing`` fail with status code 1."""

    def __init__(self, events: List[Tuple], failing: Iterable[str] = ()):
        self.events = events
        self.failing = set(failing)

    def run_step(self, step: str) -> None:
        self.events.append(('step', step))
        if step in self.failing:
            raise StepFailedError(step, return_code=1)

