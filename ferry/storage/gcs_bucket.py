import logging
from typing import Iterator, Union, Dict, Any

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage
from requests.exceptions import RequestException

from .object_store import ObjectStoreBucket
from ..errors import StorageError, ListObjectsError, DownloadError, UploadError


_TRANSPORT_ERRORS = (GoogleAPIError, GoogleAuthError, RequestException)
"""Errors raised by the Google Cloud Storage client when communicating with the service."""


class GCSBucket(ObjectStoreBucket):
    """
    A bucket in Google Cloud Storage.
    """

    def __init__(self, bucket_name: str, client: storage.Client):
        """
        Initialize the bucket.

        :param bucket_name: name of the Google Cloud Storage bucket
        :param client: authenticated storage client
        """
        super().__init__(bucket_name)
        self._client = client
        self._bucket = client.bucket(bucket_name)

    @classmethod
    def from_credentials(cls, bucket_name: str, credentials: Union[str, Dict[str, Any]]) -> 'GCSBucket':
        """
        Create a bucket authenticated with the given service account credentials.

        :param bucket_name: name of the Google Cloud Storage bucket
        :param credentials: path to a service account JSON file or the parsed JSON credentials
        :raise StorageError: if the client cannot be created from the credentials
        """
        logging.debug('Creating Google Cloud Storage client for bucket `%s`', bucket_name)
        try:
            if isinstance(credentials, str):
                client = storage.Client.from_service_account_json(credentials)
            else:
                client = storage.Client.from_service_account_info(credentials)
        except (ValueError, KeyError, OSError, GoogleAuthError) as error:
            raise StorageError('Failed to create Google Cloud Storage client from the service account '
                               'credentials') from error
        return cls(bucket_name, client)

    def _list_object_names(self, prefix: str) -> Iterator[str]:
        """
        Implementation of :py:meth:`ferry.storage.ObjectStoreBucket._list_object_names`.
        """
        try:
            for blob in self._client.list_blobs(self._bucket_name, prefix=prefix or None):
                yield blob.name
        except _TRANSPORT_ERRORS as error:
            raise ListObjectsError(self._bucket_name, prefix) from error

    def _get_object(self, object_name: str) -> bytes:
        """
        Implementation of :py:meth:`ferry.storage.ObjectStoreBucket._get_object`.
        """
        try:
            return self._bucket.blob(object_name).download_as_bytes()
        except _TRANSPORT_ERRORS as error:
            raise DownloadError(self._bucket_name, object_name) from error

    def _put_object(self, object_name: str, data: bytes, content_type: str) -> None:
        """
        Implementation of :py:meth:`ferry.storage.ObjectStoreBucket._put_object`.
        """
        logging.debug('Uploading `%s` (%s, %s bytes) to bucket `%s`', object_name, content_type, len(data),
                      self._bucket_name)
        try:
            self._bucket.blob(object_name).upload_from_string(data, content_type=content_type)
        except _TRANSPORT_ERRORS as error:
            raise UploadError(self._bucket_name, object_name) from error
