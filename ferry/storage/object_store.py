import abc
import logging
from typing import Iterator

from .bucket import Bucket
from ..errors import LocalIOError
from ..utils.paths import is_object_a_directory, is_root_prefix, local_path_for_object, object_name_for_file, \
    find_all_files, guess_content_type
from ..utils.storage import write_local_file, read_local_file


class ObjectStoreBucket(Bucket):
    """
    A bucket of a flat key-value object store.

    Implements the tree transfer of :py:class:`Bucket` on top of three provider-specific primitives:
    listing object names, fetching an object and storing an object.
    """

    def __init__(self, bucket_name: str):
        self._bucket_name = bucket_name

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    @abc.abstractmethod
    def _list_object_names(self, prefix: str) -> Iterator[str]:
        """
        List the names of all the objects starting with the given prefix (all the objects if the prefix is empty).

        :param prefix: object name prefix
        :raise ListObjectsError: if the listing fails
        """

    @abc.abstractmethod
    def _get_object(self, object_name: str) -> bytes:
        """
        Fetch the whole content of a remote object.

        :param object_name: the path to the object
        :raise DownloadError: if the object cannot be fetched
        """

    @abc.abstractmethod
    def _put_object(self, object_name: str, data: bytes, content_type: str) -> None:
        """
        Store data as a remote object.

        :param object_name: the name of the new object
        :param data: object content
        :param content_type: MIME type of the object
        :raise UploadError: if the object cannot be stored
        """

    def download_inputs(self, path_to_remote_inputs: str, path_to_local_inputs: str) -> None:
        """
        Implementation of :py:meth:`ferry.storage.Bucket.download_inputs`.
        """
        logging.debug('Downloading bucket `%s` prefix `%s` to dir `%s`', self._bucket_name, path_to_remote_inputs,
                      path_to_local_inputs)
        prefix = '' if is_root_prefix(path_to_remote_inputs) else path_to_remote_inputs

        downloaded_count = 0
        for object_name in self._list_object_names(prefix):
            if is_object_a_directory(object_name):
                logging.debug('Skipping directory marker `%s`', object_name)
                continue

            data = self._get_object(object_name)
            write_local_file(local_path_for_object(object_name, prefix, path_to_local_inputs), data)
            downloaded_count += 1

        if downloaded_count == 0:
            logging.warning('No objects downloaded from bucket `%s`. Make sure there are objects with prefix `%s`.',
                            self._bucket_name, path_to_remote_inputs)
        else:
            logging.info('Downloaded %s objects from bucket `%s`', downloaded_count, self._bucket_name)

    def upload_outputs(self, path_to_local_outputs: str, path_to_remote_outputs: str) -> None:
        """
        Implementation of :py:meth:`ferry.storage.Bucket.upload_outputs`.
        """
        logging.debug('Uploading dir `%s` to bucket `%s` prefix `%s`', path_to_local_outputs, self._bucket_name,
                      path_to_remote_outputs)
        try:
            file_paths = find_all_files(path_to_local_outputs)
        except OSError as error:
            raise LocalIOError('Failed to list files in `{}`'.format(path_to_local_outputs)) from error

        for file_path in file_paths:
            object_name = object_name_for_file(file_path, path_to_local_outputs, path_to_remote_outputs)
            self._put_object(object_name, read_local_file(file_path), guess_content_type(file_path))

        if len(file_paths) == 0:
            logging.warning('No files uploaded to bucket `%s`. Make sure the outputs are in the `%s` dir.',
                            self._bucket_name, path_to_local_outputs)
        else:
            logging.info('Uploaded %s files to bucket `%s`', len(file_paths), self._bucket_name)
