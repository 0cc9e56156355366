import pytest

from ferry.config import FerryConfig
from ferry.errors import CredentialsNotFoundError
from ferry.job import Job, Provider
from ferry.storage import MinioBucket
from ferry.storage.factory import create_bucket


def make_job(provider: str) -> Job:
    return Job({'provider': provider, 'bucket_name': 'ferry-test', 'path_to_local_inputs': '/tmp/in',
                'path_to_local_outputs': '/tmp/out'})


def test_gcp_credentials_not_found(no_credentials, config, mocker):
    gcs_bucket = mocker.patch('ferry.storage.factory.GCSBucket')

    with pytest.raises(CredentialsNotFoundError) as error_info:
        create_bucket(make_job(Provider.GCP), config)

    assert error_info.value.provider == 'GCP'
    assert 'GOOGLE_APPLICATION_CREDENTIALS' in str(error_info.value)
    gcs_bucket.from_credentials.assert_not_called()


def test_gcp_bucket(no_credentials, config, mocker, monkeypatch):
    monkeypatch.setenv('GOOGLE_APPLICATION_CREDENTIALS_JSON', '{"type": "service_account"}')
    gcs_bucket = mocker.patch('ferry.storage.factory.GCSBucket')

    bucket = create_bucket(make_job(Provider.GCP), config)

    gcs_bucket.from_credentials.assert_called_once_with('ferry-test', {'type': 'service_account'})
    assert bucket is gcs_bucket.from_credentials.return_value


def test_minio_credentials_not_found(no_credentials, config):
    with pytest.raises(CredentialsNotFoundError) as error_info:
        create_bucket(make_job(Provider.MINIO), config)
    assert 'MINIO_ENDPOINT' in str(error_info.value)


def test_minio_bucket_from_config(no_credentials, job_data):
    config = FerryConfig({'jobs': {'copy': job_data},
                          'minio': {'url': 'http://0.0.0.0:7000', 'access_key': 'key', 'secret_key': 'secret'}})

    bucket = create_bucket(make_job(Provider.MINIO), config)

    assert isinstance(bucket, MinioBucket)
    assert bucket.bucket_name == 'ferry-test'


def test_minio_bucket_from_env(no_credentials, config, monkeypatch):
    monkeypatch.setenv('MINIO_ENDPOINT', 'http://0.0.0.0:7000')
    monkeypatch.setenv('MINIO_ACCESS_KEY', 'key')
    monkeypatch.setenv('MINIO_SECRET_KEY', 'secret')

    assert isinstance(create_bucket(make_job(Provider.MINIO), config), MinioBucket)
