import io
import logging
from typing import Iterator

from minio import Minio
from minio.error import MinioException
from urllib3.exceptions import HTTPError

from .object_store import ObjectStoreBucket
from ..errors import ListObjectsError, DownloadError, UploadError


_TRANSPORT_ERRORS = (MinioException, HTTPError)
"""Errors raised by the minio client when communicating with the server."""


class MinioBucket(ObjectStoreBucket):
    """
    A bucket in Minio (or any other S3 compatible storage).
    """

    def __init__(self, bucket_name: str, minio: Minio):
        """
        Initialize the bucket.

        :param bucket_name: name of the bucket
        :param minio: minio handle
        """
        super().__init__(bucket_name)
        self._minio = minio

    @classmethod
    def from_config(cls, bucket_name: str, storage_config) -> 'MinioBucket':
        """
        Create a bucket accessed with the given endpoint and credentials.

        :param bucket_name: name of the bucket
        :param storage_config: minio endpoint and credentials (:py:class:`ferry.config.StorageConfig`)
        """
        logging.debug('Creating minio handle for `%s`', storage_config.schemeless_url)
        minio = Minio(storage_config.schemeless_url, access_key=storage_config.access_key,
                      secret_key=storage_config.secret_key, secure=storage_config.secure)
        return cls(bucket_name, minio)

    def _list_object_names(self, prefix: str) -> Iterator[str]:
        """
        Implementation of :py:meth:`ferry.storage.ObjectStoreBucket._list_object_names`.
        """
        try:
            for obj in self._minio.list_objects(self._bucket_name, prefix=prefix or None, recursive=True):
                yield obj.object_name
        except _TRANSPORT_ERRORS as error:
            raise ListObjectsError(self._bucket_name, prefix) from error

    def _get_object(self, object_name: str) -> bytes:
        """
        Implementation of :py:meth:`ferry.storage.ObjectStoreBucket._get_object`.
        """
        try:
            response = self._minio.get_object(self._bucket_name, object_name)
            try:
                return response.read()
            finally:
                response.close()
                response.release_conn()
        except _TRANSPORT_ERRORS as error:
            raise DownloadError(self._bucket_name, object_name) from error

    def _put_object(self, object_name: str, data: bytes, content_type: str) -> None:
        """
        Implementation of :py:meth:`ferry.storage.ObjectStoreBucket._put_object`.
        """
        logging.debug('Uploading `%s` (%s, %s bytes) to bucket `%s`', object_name, content_type, len(data),
                      self._bucket_name)
        try:
            self._minio.put_object(self._bucket_name, object_name, io.BytesIO(data), len(data),
                                   content_type=content_type)
        except _TRANSPORT_ERRORS as error:
            raise UploadError(self._bucket_name, object_name) from error
