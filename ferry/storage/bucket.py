import abc


class Bucket(metaclass=abc.ABCMeta):
    """
    An interface for services that provide access to job data in a remote storage bucket.
    """

    @abc.abstractmethod
    def download_inputs(self, path_to_remote_inputs: str, path_to_local_inputs: str) -> None:
        """
        Download all the objects under the ``path_to_remote_inputs`` prefix to the ``path_to_local_inputs`` directory.

        Object names are mapped to local paths by replacing the leading remote prefix with the local directory.
        If the remote prefix is empty, the whole bucket is downloaded and flattened into the local directory
        (only the base names of the objects are kept). Directory markers are skipped, missing local directories
        are created and existing files are overwritten.

        :param path_to_remote_inputs: prefix of the objects to be downloaded
        :param path_to_local_inputs: the directory where the objects should be downloaded
        :raises ListObjectsError: the objects could not be listed
        :raises DownloadError: an object could not be downloaded
        :raises LocalIOError: a downloaded object could not be written to disk
        """

    @abc.abstractmethod
    def upload_outputs(self, path_to_local_outputs: str, path_to_remote_outputs: str) -> None:
        """
        Upload all the files under the ``path_to_local_outputs`` directory to the ``path_to_remote_outputs`` prefix.

        Object names are computed by replacing the leading local directory of each file path with the remote
        prefix. Directories are not uploaded as separate objects and existing objects are overwritten.

        :param path_to_local_outputs: the directory from which the files should be uploaded
        :param path_to_remote_outputs: prefix of the uploaded objects
        :raises UploadError: a file could not be uploaded
        :raises LocalIOError: a file could not be read from disk
        """
