import os.path as path

import pytest

from ferry.config import FerryConfig
from ferry.constants import GCP_CREDENTIALS_FILE_VARIABLES, GCP_CREDENTIALS_JSON_VARIABLES, \
    MINIO_ENDPOINT_VARIABLE, MINIO_ACCESS_KEY_VARIABLE, MINIO_SECRET_KEY_VARIABLE
from ferry.job import Job

from stubs import StubBucket, RecordingStepRunner


@pytest.fixture()
def events():
    yield []


@pytest.fixture()
def stub_bucket(events):
    yield StubBucket(events)


@pytest.fixture()
def step_runner(events):
    yield RecordingStepRunner(events)


@pytest.fixture()
def job_dirs(tmpdir):
    """Local inputs and outputs directories of a job (neither of them exists yet)."""
    yield path.join(str(tmpdir), 'in'), path.join(str(tmpdir), 'out')


@pytest.fixture()
def job_data(job_dirs):
    local_inputs, local_outputs = job_dirs
    yield {
        'provider': 'GCP',
        'bucket_name': 'ferry-test',
        'path_to_remote_inputs': 'data',
        'path_to_local_inputs': local_inputs,
        'path_to_local_outputs': local_outputs,
        'path_to_remote_outputs': 'results',
        'steps': ['cp -r [path_to_local_inputs] [path_to_local_outputs]'],
    }


@pytest.fixture()
def job(job_data):
    job = Job(job_data)
    job.validate()
    yield job


@pytest.fixture()
def config(job_data):
    config = FerryConfig({'jobs': {'copy': job_data}})
    config.validate()
    yield config


@pytest.fixture()
def no_credentials(monkeypatch):
    """Make sure no storage credentials can be found in the environment."""
    for variable in (*GCP_CREDENTIALS_FILE_VARIABLES, *GCP_CREDENTIALS_JSON_VARIABLES, MINIO_ENDPOINT_VARIABLE,
                     MINIO_ACCESS_KEY_VARIABLE, MINIO_SECRET_KEY_VARIABLE):
        monkeypatch.delenv(variable, raising=False)
