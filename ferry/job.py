import os
import re
import logging
from typing import List, Dict

from schematics import Model
from schematics.types import StringType, ListType

from .constants import REMOTE_INPUTS_PLACEHOLDER, LOCAL_INPUTS_PLACEHOLDER, LOCAL_OUTPUTS_PLACEHOLDER, \
    REMOTE_OUTPUTS_PLACEHOLDER
from .errors import InvalidPathError
from .runner.step_runner import StepRunner
from .storage.bucket import Bucket
from .utils.status import print_status


class Provider:
    """
    Used as an enum class that represents all supported remote storage providers.
    """
    GCP = "GCP"
    MINIO = "MINIO"


PROVIDERS = [*map(lambda p: getattr(Provider, p), filter(str.isupper, dir(Provider)))]
"""All the supported provider tags."""


_PATH_FIELDS = (
    ('remote_inputs', 'path_to_remote_inputs', REMOTE_INPUTS_PLACEHOLDER),
    ('local_inputs', 'path_to_local_inputs', LOCAL_INPUTS_PLACEHOLDER),
    ('local_outputs', 'path_to_local_outputs', LOCAL_OUTPUTS_PLACEHOLDER),
    ('remote_outputs', 'path_to_remote_outputs', REMOTE_OUTPUTS_PLACEHOLDER),
)
"""(field name used in errors, job attribute, step placeholder) for every path of a job."""

_PLACEHOLDER_PATTERN = re.compile('|'.join(re.escape(placeholder) for _, _, placeholder in _PATH_FIELDS))


def render_path(value, field: str) -> str:
    """
    Render a configured path as a string which is valid on this platform.

    :param value: the configured path (``str``, ``bytes`` or path-like)
    :param field: name of the job field the path comes from
    :raise InvalidPathError: if the path is not valid unicode or contains a NUL character
    :return: the rendered path
    """
    try:
        rendered = os.fspath(value)
        if isinstance(rendered, bytes):
            rendered = rendered.decode('utf-8')
        rendered.encode('utf-8')
    except (TypeError, UnicodeError) as error:
        raise InvalidPathError(field) from error

    if '\x00' in rendered:
        raise InvalidPathError(field)
    return rendered


class Job(Model):
    """
    A single configured unit of work: download the remote inputs, run the steps and upload the local outputs.
    """
    provider: str = StringType(required=True, choices=PROVIDERS, deserialize_from=['cloud_service_provider'])
    bucket_name: str = StringType(required=True)
    path_to_remote_inputs: str = StringType(default='')
    path_to_local_inputs: str = StringType(required=True)
    path_to_local_outputs: str = StringType(required=True)
    path_to_remote_outputs: str = StringType(default='')
    steps: List[str] = ListType(StringType, default=lambda: [])

    def _render(self, field: str) -> str:
        for name, attribute, _ in _PATH_FIELDS:
            if name == field:
                return render_path(getattr(self, attribute), name)
        raise KeyError(field)

    def get_rendered_paths(self) -> Dict[str, str]:
        """
        Render all the paths of this job.

        :raise InvalidPathError: naming the first path which cannot be rendered
        :return: mapping from step placeholders to the rendered paths
        """
        return {placeholder: self._render(name) for name, _, placeholder in _PATH_FIELDS}

    def get_steps(self) -> List[str]:
        """
        Return the steps of this job with all the ``[path_to_*]`` placeholders substituted.

        Placeholders are matched literally and substituted in a single pass, so a rendered path which happens
        to contain a placeholder is not substituted again.

        :raise InvalidPathError: if any of the job paths cannot be rendered
        :return: list of runnable steps
        """
        paths = self.get_rendered_paths()
        return [_PLACEHOLDER_PATTERN.sub(lambda match: paths[match.group(0)], step) for step in self.steps]

    def run(self, bucket: Bucket, step_runner: StepRunner) -> None:
        """
        Execute the job from start to finish.

        Inputs are downloaded first, then the steps are run one after another and finally the outputs
        are uploaded. The first failure aborts the job, nothing is rolled back.

        :param bucket: remote storage of the job
        :param step_runner: runner executing the job steps
        """
        remote_inputs = self._render('remote_inputs')
        local_inputs = self._render('local_inputs')
        print_status('Downloading', '"{}" to "{}"'.format(remote_inputs, local_inputs), indented=True)
        bucket.download_inputs(remote_inputs, local_inputs)

        steps = self.get_steps()
        for i, step in enumerate(steps, start=1):
            print_status('Running', '`{}`'.format(step), indented=True)
            logging.debug('Running step %s/%s `%s`', i, len(steps), step)
            step_runner.run_step(step)

        local_outputs = self._render('local_outputs')
        remote_outputs = self._render('remote_outputs')
        print_status('Uploading', '"{}" to "{}"'.format(local_outputs, remote_outputs), indented=True)
        bucket.upload_outputs(local_outputs, remote_outputs)
