"""S3-backed object store.

Each document is one object in a bucket, optionally under a key prefix that
acts as the namespace. boto3 handles transport retries; every botocore
failure is surfaced as ``BackendError`` with the service's message attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from errors import BackendError

from .interfaces import ObjectStore

if TYPE_CHECKING:
    from settings import Settings


def create_s3_client(settings: Settings) -> Any:
    """Create a boto3 S3 client from runtime settings.

    Args:
        settings: Runtime settings with optional region and endpoint.

    Returns:
        Boto3 S3 client.
    """
    session_kwargs: dict[str, str] = {}
    if settings.s3_region:
        session_kwargs["region_name"] = settings.s3_region
    session = boto3.session.Session(**session_kwargs)

    client_kwargs: dict[str, Any] = {
        "config": Config(retries={"max_attempts": 3, "mode": "standard"}),
    }
    if settings.s3_endpoint_url:
        client_kwargs["endpoint_url"] = settings.s3_endpoint_url
    return session.client("s3", **client_kwargs)


class S3ObjectStore(ObjectStore):
    name = "s3"

    def __init__(
        self,
        client: Any,
        bucket: str,
        *,
        prefix: str = "",
        region: str = "",
        endpoint_url: str = "",
    ) -> None:
        self._client = client
        self._bucket = bucket
        self._prefix = prefix.strip("/")
        self._region = region
        self._endpoint_url = endpoint_url.rstrip("/")

    def put(self, key: str, body: bytes, *, content_type: str) -> str:
        object_key = self._object_key(key)
        try:
            resp = self._client.put_object(
                Bucket=self._bucket,
                Key=object_key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            raise BackendError(f"put_object s3://{self._bucket}/{object_key} failed: {e}") from e
        # S3 returns the ETag wrapped in double quotes.
        return str(resp.get("ETag") or "").strip('"')

    def list_keys(self) -> list[str]:
        list_kwargs = {"Bucket": self._bucket}
        namespace = f"{self._prefix}/" if self._prefix else ""
        if namespace:
            list_kwargs["Prefix"] = namespace

        keys: list[str] = []
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(**list_kwargs):
                for obj in page.get("Contents", []):
                    object_key = str(obj.get("Key") or "")
                    if not object_key.startswith(namespace):
                        continue
                    rel = object_key[len(namespace):]
                    # Skip folder placeholder objects.
                    if not rel or rel.endswith("/"):
                        continue
                    keys.append(rel)
        except (BotoCoreError, ClientError) as e:
            raise BackendError(f"list_objects_v2 s3://{self._bucket}/{namespace} failed: {e}") from e
        return keys

    def get(self, key: str) -> bytes:
        object_key = self._object_key(key)
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=object_key)
            return resp["Body"].read()
        except (BotoCoreError, ClientError) as e:
            raise BackendError(f"get_object s3://{self._bucket}/{object_key} failed: {e}") from e

    def locator(self, key: str) -> str:
        object_key = quote(self._object_key(key), safe="/")
        if self._endpoint_url:
            return f"{self._endpoint_url}/{self._bucket}/{object_key}"
        if self._region:
            return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{object_key}"
        return f"https://{self._bucket}.s3.amazonaws.com/{object_key}"

    def _object_key(self, key: str) -> str:
        return f"{self._prefix}/{key}" if self._prefix else key
