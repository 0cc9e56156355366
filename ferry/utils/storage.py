import os
import logging
import os.path as path

from ..errors import LocalIOError


__all__ = ['write_local_file', 'read_local_file']


def write_local_file(file_path: str, data: bytes) -> None:
    """
    Write the given data to a file, creating its parent directories if needed.

    :param file_path: path of the file to be (over)written
    :param data: file content
    :raise LocalIOError: if the directories or the file cannot be created
    """
    logging.debug('Writing %s bytes to `%s`', len(data), file_path)
    try:
        parent = path.dirname(file_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(file_path, 'wb') as file:
            file.write(data)
    except OSError as error:
        raise LocalIOError('Failed to write file `{}`'.format(file_path)) from error


def read_local_file(file_path: str) -> bytes:
    """
    Read the whole content of a file.

    :param file_path: path of the file to be read
    :raise LocalIOError: if the file cannot be read
    :return: file content
    """
    try:
        with open(file_path, 'rb') as file:
            return file.read()
    except OSError as error:
        raise LocalIOError('Failed to read file `{}`'.format(file_path)) from error
