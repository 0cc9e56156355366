import logging

from .bucket import Bucket
from .gcs_bucket import GCSBucket
from .minio_bucket import MinioBucket
from ..config import FerryConfig
from ..errors import CredentialsNotFoundError
from ..job import Job, Provider
from ..utils.credentials import find_gcp_credentials, find_minio_credentials


def create_bucket(job: Job, config: FerryConfig) -> Bucket:
    """
    Create the bucket of the given job according to its provider.

    The provider credentials are only checked to be present; they are not verified until the first request.

    :param job: job whose bucket should be created
    :param config: ferry configuration
    :raise CredentialsNotFoundError: if the credentials of the job provider cannot be found
    :return: bucket implementation for the job provider
    """
    logging.debug('Creating `%s` bucket `%s`', job.provider, job.bucket_name)
    if job.provider == Provider.GCP:
        credentials = find_gcp_credentials()
        if credentials is None:
            raise CredentialsNotFoundError(Provider.GCP)
        return GCSBucket.from_credentials(job.bucket_name, credentials)
    elif job.provider == Provider.MINIO:
        storage_config = find_minio_credentials(config.minio)
        if storage_config is None:
            raise CredentialsNotFoundError(Provider.MINIO)
        return MinioBucket.from_config(job.bucket_name, storage_config)
    else:
        raise ValueError('Unknown storage provider: {}'.format(job.provider))
