from .base import FerryError


__all__ = ['CredentialsNotFoundError', 'StorageError', 'ListObjectsError', 'DownloadError', 'UploadError']


_CREDENTIALS_HINTS = {
    'GCP': 'Looked for a path to a JSON file on disk in the `SERVICE_ACCOUNT` and '
           '`GOOGLE_APPLICATION_CREDENTIALS` environment variables, and looked for credentials as JSON in the '
           '`SERVICE_ACCOUNT_JSON` and `GOOGLE_APPLICATION_CREDENTIALS_JSON` environment variables.',
    'MINIO': 'Looked for the `minio` section of the config file, and for the `MINIO_ENDPOINT`, '
             '`MINIO_ACCESS_KEY` and `MINIO_SECRET_KEY` environment variables.'
}


class CredentialsNotFoundError(FerryError):
    """Exception raised when the credentials for the remote storage of a job cannot be found."""

    def __init__(self, provider: str):
        message = 'Could not find `{}` storage credentials.'.format(provider)
        if provider in _CREDENTIALS_HINTS:
            message += ' ' + _CREDENTIALS_HINTS[provider]
        super().__init__(message)
        self.provider = provider


class StorageError(FerryError):
    """Exception raised when communication with the remote storage fails."""


class ListObjectsError(StorageError):
    """Exception raised when the objects of a bucket cannot be listed."""

    def __init__(self, bucket_name: str, prefix: str):
        super().__init__('Failed to list objects with prefix `{}` in bucket `{}`'.format(prefix, bucket_name))
        self.bucket_name = bucket_name
        self.prefix = prefix


class DownloadError(StorageError):
    """Exception raised when an object cannot be downloaded."""

    def __init__(self, bucket_name: str, object_name: str):
        super().__init__('Failed to download `{}/{}`'.format(bucket_name, object_name))
        self.bucket_name = bucket_name
        self.object_name = object_name


class UploadError(StorageError):
    """Exception raised when an object cannot be uploaded."""

    def __init__(self, bucket_name: str, object_name: str):
        super().__init__('Failed to upload object `{}/{}`'.format(bucket_name, object_name))
        self.bucket_name = bucket_name
        self.object_name = object_name
