import os
import json
import logging
import os.path as path
from typing import Optional, Union, Dict, Any

from ..config import StorageConfig
from ..constants import GCP_CREDENTIALS_FILE_VARIABLES, GCP_CREDENTIALS_JSON_VARIABLES, MINIO_ENDPOINT_VARIABLE, \
    MINIO_ACCESS_KEY_VARIABLE, MINIO_SECRET_KEY_VARIABLE


__all__ = ['find_gcp_credentials', 'find_minio_credentials']


def _parse_json_object(contents: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(contents)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def find_gcp_credentials() -> Optional[Union[str, Dict[str, Any]]]:
    """
    Look for Google Cloud service account credentials.

    .. note::
        The environment variables are checked in order: ``SERVICE_ACCOUNT`` and
        ``GOOGLE_APPLICATION_CREDENTIALS`` may point to a JSON file on disk, ``SERVICE_ACCOUNT_JSON`` and
        ``GOOGLE_APPLICATION_CREDENTIALS_JSON`` may contain the JSON credentials themselves.
        The credentials are only checked to exist, they are not verified against Google Cloud.

    :return: path to the credentials file, parsed credentials, or ``None`` if nothing was found
    """
    for variable in GCP_CREDENTIALS_FILE_VARIABLES:
        credentials_path = os.environ.get(variable)
        if credentials_path and path.exists(credentials_path):
            logging.debug('Using GCP credentials file `%s` from `%s`', credentials_path, variable)
            return credentials_path

    for variable in GCP_CREDENTIALS_JSON_VARIABLES:
        contents = os.environ.get(variable)
        if contents is None:
            continue
        info = _parse_json_object(contents)
        if info is not None:
            logging.debug('Using GCP credentials from `%s`', variable)
            return info
        logging.warning('Environment variable `%s` does not contain a JSON object, ignoring it', variable)

    return None


def find_minio_credentials(storage_config: Optional[StorageConfig] = None) -> Optional[StorageConfig]:
    """
    Look for Minio endpoint and credentials, first in the given config section, then in the environment.

    :param storage_config: optional ``minio`` section of the ferry config
    :return: complete storage configuration or ``None`` if it cannot be found
    """
    if storage_config is not None:
        return storage_config

    values = {key: os.environ.get(variable) for key, variable in (('url', MINIO_ENDPOINT_VARIABLE),
                                                                  ('access_key', MINIO_ACCESS_KEY_VARIABLE),
                                                                  ('secret_key', MINIO_SECRET_KEY_VARIABLE))}
    if not all(values.values()):
        return None

    storage_config = StorageConfig(values)
    storage_config.validate()
    return storage_config
