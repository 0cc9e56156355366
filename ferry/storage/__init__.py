from .bucket import Bucket
from .object_store import ObjectStoreBucket
from .gcs_bucket import GCSBucket
from .minio_bucket import MinioBucket

__all__ = ['Bucket', 'ObjectStoreBucket', 'GCSBucket', 'MinioBucket']
