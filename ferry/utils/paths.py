import os
import mimetypes
import os.path as path
from typing import List

from ..constants import OBJECT_DELIMITER, DEFAULT_CONTENT_TYPE


__all__ = ['is_object_a_directory', 'is_root_prefix', 'local_path_for_object', 'object_name_for_file',
           'find_all_files', 'guess_content_type']


def is_object_a_directory(object_name: str) -> bool:
    """
    Check if the given object name is a directory marker rather than downloadable content.

    >>> is_object_a_directory("foo/bar/")
    True
    >>> is_object_a_directory("foo/bar")
    False
    """
    return object_name.endswith(OBJECT_DELIMITER)


def is_root_prefix(prefix: str) -> bool:
    """
    Check if the given remote prefix addresses the whole bucket.

    >>> is_root_prefix("")
    True
    >>> is_root_prefix("/")
    True
    >>> is_root_prefix("data")
    False
    """
    return prefix in ("", OBJECT_DELIMITER)


def local_path_for_object(object_name: str, remote_prefix: str, local_dir: str) -> str:
    """
    Compute where a remote object should be stored on disk.

    The leading ``remote_prefix`` of the object name is replaced by ``local_dir``. This is a plain string
    substitution, path components are not taken into account. When ``remote_prefix`` addresses the whole
    bucket, only the base name of the object is kept, i.e. the remote tree is flattened into ``local_dir``.

    >>> local_path_for_object("data/x/y.txt", "data", "/tmp/in")
    '/tmp/in/x/y.txt'
    >>> local_path_for_object("a/b/c.txt", "", "/tmp/in")
    '/tmp/in/c.txt'

    :param object_name: name of the remote object
    :param remote_prefix: prefix the object was listed with
    :param local_dir: local directory that replaces the prefix
    :return: local file path
    """
    if is_root_prefix(remote_prefix):
        return path.join(local_dir, object_name.rsplit(OBJECT_DELIMITER, 1)[-1])
    if not object_name.startswith(remote_prefix):
        raise ValueError('Object `{}` does not start with prefix `{}`'.format(object_name, remote_prefix))
    return local_dir + object_name[len(remote_prefix):]


def object_name_for_file(file_path: str, local_dir: str, remote_prefix: str) -> str:
    """
    Compute the name of the remote object a local file should be uploaded to.

    The leading ``local_dir`` of the file path is replaced by ``remote_prefix`` (again a plain string
    substitution). When ``remote_prefix`` addresses the whole bucket (``""`` or ``"/"``), the leading delimiter
    is stripped, so the result differs from plain substitution: ``p/q.bin`` rather than ``/p/q.bin``.

    >>> object_name_for_file("/tmp/out/p/q.bin", "/tmp/out", "results")
    'results/p/q.bin'
    >>> object_name_for_file("/tmp/out/p/q.bin", "/tmp/out", "")
    'p/q.bin'

    :param file_path: path of the local file
    :param local_dir: local directory the file was found in
    :param remote_prefix: prefix that replaces ``local_dir``
    :return: remote object name
    """
    if not file_path.startswith(local_dir):
        raise ValueError('File `{}` does not lie in directory `{}`'.format(file_path, local_dir))
    relative = file_path[len(local_dir):].replace(path.sep, OBJECT_DELIMITER)
    if is_root_prefix(remote_prefix):
        return relative.lstrip(OBJECT_DELIMITER)
    return remote_prefix + relative


def find_all_files(directory: str) -> List[str]:
    """
    Recursively list all regular files in the given directory (depth-first, in name order).

    Directories themselves are not listed. A directory which does not exist contains no files.

    :param directory: the directory to be searched
    :raise OSError: if the directory cannot be read
    :return: list of file paths
    """
    files = []
    if not path.isdir(directory):
        return files
    for name in sorted(os.listdir(directory)):
        entry = path.join(directory, name)
        if path.isdir(entry):
            files.extend(find_all_files(entry))
        elif path.isfile(entry):
            files.append(entry)
    return files


def guess_content_type(file_path: str) -> str:
    """
    Guess the MIME type of a file from its name.

    >>> guess_content_type("report.json")
    'application/json'
    >>> guess_content_type("blob.unknownext")
    'application/octet-stream'
    """
    return mimetypes.guess_type(file_path)[0] or DEFAULT_CONTENT_TYPE
