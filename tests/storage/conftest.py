import io
from types import SimpleNamespace
from typing import Dict, Optional

import pytest


class FakeGCSBlob:

    def __init__(self, client: 'FakeGCSClient', name: str):
        self._client = client
        self.name = name

    def download_as_bytes(self) -> bytes:
        if self._client.download_error is not None:
            raise self._client.download_error
        return self._client.objects[self.name]

    def upload_from_string(self, data: bytes, content_type: Optional[str] = None) -> None:
        if self._client.upload_error is not None:
            raise self._client.upload_error
        self._client.objects[self.name] = data
        self._client.content_types[self.name] = content_type


class FakeGCSClient:
    """In-memory stand-in for :py:class:`google.cloud.storage.Client` holding a single bucket."""

    def __init__(self):
        self.objects: Dict[str, bytes] = {}
        self.content_types: Dict[str, str] = {}
        self.list_error: Optional[Exception] = None
        self.download_error: Optional[Exception] = None
        self.upload_error: Optional[Exception] = None
        self.list_calls = []

    def bucket(self, bucket_name: str):
        return SimpleNamespace(name=bucket_name, blob=lambda name: FakeGCSBlob(self, name))

    def list_blobs(self, bucket_name: str, prefix: Optional[str] = None):
        self.list_calls.append((bucket_name, prefix))
        if self.list_error is not None:
            raise self.list_error  # raised when the first page is requested, as in the real client
        for name in sorted(self.objects):
            if prefix is None or name.startswith(prefix):
                yield SimpleNamespace(name=name)


class FakeMinioResponse:

    def __init__(self, data: bytes):
        self._data = data
        self.closed = False
        self.released = False

    def read(self) -> bytes:
        return self._data

    def close(self) -> None:
        self.closed = True

    def release_conn(self) -> None:
        self.released = True


class FakeMinio:
    """In-memory stand-in for :py:class:`minio.Minio`."""

    def __init__(self):
        self.buckets: Dict[str, Dict[str, bytes]] = {}
        self.content_types: Dict[str, str] = {}
        self.responses = []
        self.list_error: Optional[Exception] = None
        self.get_error: Optional[Exception] = None
        self.put_error: Optional[Exception] = None

    def list_objects(self, bucket_name: str, prefix: Optional[str] = None, recursive: bool = False):
        assert recursive
        if self.list_error is not None:
            raise self.list_error
        for name in sorted(self.buckets[bucket_name]):
            if prefix is None or name.startswith(prefix):
                yield SimpleNamespace(bucket_name=bucket_name, object_name=name, is_dir=name.endswith('/'))

    def get_object(self, bucket_name: str, object_name: str):
        if self.get_error is not None:
            raise self.get_error
        response = FakeMinioResponse(self.buckets[bucket_name][object_name])
        self.responses.append(response)
        return response

    def put_object(self, bucket_name: str, object_name: str, data: io.BytesIO, length: int,
                   content_type: str = 'application/octet-stream'):
        if self.put_error is not None:
            raise self.put_error
        content = data.read()
        assert len(content) == length
        self.buckets.setdefault(bucket_name, {})[object_name] = content
        self.content_types[object_name] = content_type


@pytest.fixture()
def gcs_client():
    yield FakeGCSClient()


@pytest.fixture()
def fake_minio():
    minio = FakeMinio()
    minio.buckets['ferry-test'] = {}
    yield minio
