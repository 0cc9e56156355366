import logging
import re
import os
import yaml
from typing import Optional, Dict

from schematics import Model
from schematics.types import ModelType, DictType, StringType

from .job import Job


def strip_url_scheme(url):
    """
    >>> strip_url_scheme("https://google.com")
    'google.com'
    >>> strip_url_scheme("http://google.com")
    'google.com'
    >>> strip_url_scheme("google.com")
    'google.com'
    """

    match = re.match(r'[^:]+://(.*)', url)
    if match is None:
        return url
    return match.group(1)


class StorageConfig(Model):
    url: str = StringType(required=True)
    access_key: str = StringType(required=True)
    secret_key: str = StringType(required=True)

    @property
    def schemeless_url(self):
        return strip_url_scheme(self.url)

    @property
    def secure(self) -> bool:
        return self.url.startswith("https://")  # If no scheme is given


class LoggingConfig(Model):
    level: str = StringType(default="info", choices=["debug", "info", "warning", "error", "critical"])

    @property
    def log_level(self):
        return getattr(logging, self.level.upper())


class FerryConfig(Model):
    jobs: Dict[str, Job] = DictType(ModelType(Job), required=True)
    logging: LoggingConfig = ModelType(LoggingConfig, required=False, default=LoggingConfig(dict(level='info')))
    minio: Optional[StorageConfig] = ModelType(StorageConfig, required=False)


_ENV_NO_BRACKETS = re.compile(r'([^$]*)\$([A-Z_][A-Z_0-9]*)')
_ENV_BRACKETS = re.compile(r'([^$]*)\${([A-Z_][A-Z_0-9]*)}')


class _EnvLoader(yaml.SafeLoader):
    """Safe YAML loader which expands ``$NAME`` and ``${NAME}`` environment variables in plain scalars."""


def _env_constructor(loader, node):
    value = loader.construct_scalar(node)

    def replace_env_vars(matchobj):
        env_name = matchobj.group(2)
        if env_name not in os.environ:
            raise ValueError(f'Environment variable `{env_name}` not set')
        return matchobj.group(1) + os.environ[env_name]

    value = _ENV_NO_BRACKETS.sub(replace_env_vars, value)
    value = _ENV_BRACKETS.sub(replace_env_vars, value)
    return value


_EnvLoader.add_implicit_resolver('!env', _ENV_NO_BRACKETS, None)
_EnvLoader.add_implicit_resolver('!env', _ENV_BRACKETS, None)
_EnvLoader.add_constructor('!env', _env_constructor)


def load_ferry_config(config_stream) -> FerryConfig:
    """
    Load and validate ferry configuration from the given YAML stream.

    :param config_stream: stream with the YAML document
    :raise ValueError: if a referenced environment variable is not set or the document is not a mapping
    :raise DataError: if the configuration is invalid
    :return: validated configuration
    """
    config_object = yaml.load(config_stream, Loader=_EnvLoader)
    if not isinstance(config_object, dict):
        raise ValueError('Config file must contain a mapping, got `{}`'.format(type(config_object).__name__))

    config = FerryConfig(config_object)
    config.validate()
    return config
