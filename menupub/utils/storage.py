import logging
import os

import aioboto3

log = logging.getLogger(__name__)

SPACES_KEY = os.getenv("SPACES_KEY")
SPACES_SECRET = os.getenv("SPACES_SECRET")
SPACES_REGION = os.getenv("SPACES_REGION", "fra1")
SPACES_BUCKET = os.getenv("SPACES_BUCKET")
SPACES_ENDPOINT = os.getenv("SPACES_ENDPOINT")  # e.g. https://fra1.digitaloceanspaces.com
SPACES_CDN_BASE = (os.getenv("SPACES_CDN_BASE") or "").rstrip("/")  # e.g. https://<bucket>.fra1.cdn.digitaloceanspaces.com
SPACES_PREFIX = os.getenv("SPACES_PREFIX", "prod").strip("/")

_session = aioboto3.Session()


def _configured() -> bool:
    return all([SPACES_KEY, SPACES_SECRET, SPACES_BUCKET, SPACES_ENDPOINT, SPACES_CDN_BASE])


def _client():
    return _session.client(
        "s3",
        region_name=SPACES_REGION,
        endpoint_url=SPACES_ENDPOINT,
        aws_access_key_id=SPACES_KEY,
        aws_secret_access_key=SPACES_SECRET,
    )


def public_url(key: str) -> str:
    key = key.lstrip("/")
    return f"{SPACES_CDN_BASE}/{key}"


def image_key(restaurant_id: str, kind: str, filename: str) -> str:
    return f"{SPACES_PREFIX}/restaurants/{restaurant_id}/{kind}/{filename}"


def is_managed_url(url: str) -> bool:
    """True for URLs pointing into our bucket; external links are never deleted"""
    return bool(url and SPACES_CDN_BASE and url.startswith(f"{SPACES_CDN_BASE}/"))


def key_from_url(url: str) -> str:
    return url[len(SPACES_CDN_BASE) + 1:]


async def put_public_object(*, key: str, body: bytes, content_type: str) -> str:
    """
    Uploads a public-read object and returns the object key.
    """
    if not _configured():
        raise RuntimeError("Spaces env vars not fully configured")

    key = key.lstrip("/")
    async with _client() as s3:
        await s3.put_object(
            Bucket=SPACES_BUCKET,
            Key=key,
            Body=body,
            ContentType=content_type or "application/octet-stream",
            ACL="public-read",
        )
    log.info("stored object: key=%s bytes=%s", key, len(body))
    return key


async def delete_object(url: str) -> bool:
    if not is_managed_url(url):
        return False
    if not _configured():
        raise RuntimeError("Spaces env vars not fully configured")

    key = key_from_url(url)
    async with _client() as s3:
        await s3.delete_object(Bucket=SPACES_BUCKET, Key=key)
    log.info("deleted object: key=%s", key)
    return True
