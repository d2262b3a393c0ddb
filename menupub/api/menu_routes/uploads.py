import logging
import os
import uuid

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import HTTPException, UploadFile

from menupub.core.constants import ALLOWED_IMAGE_EXTS, MAX_IMAGE_SIZE
from menupub.utils.storage import delete_object, image_key, is_managed_url, public_url, put_public_object

log = logging.getLogger(__name__)


async def store_menu_image(photo: UploadFile, restaurant_id: str, kind: str = "items") -> str:
    """Upload a menu picture and return its public URL"""
    ext = os.path.splitext(photo.filename or "")[1].lower()
    if ext not in ALLOWED_IMAGE_EXTS:
        raise HTTPException(status_code=400, detail="Invalid image type. Allowed: jpg, jpeg, png, webp")

    contents = await photo.read()
    if not contents:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(contents) > MAX_IMAGE_SIZE:
        raise HTTPException(status_code=400, detail="Image too large (max 10MB)")

    key = image_key(restaurant_id, kind, f"{uuid.uuid4().hex}{ext}")
    try:
        await put_public_object(key=key, body=contents, content_type=photo.content_type)
    except (BotoCoreError, ClientError, RuntimeError) as e:
        log.error("image upload failed: restaurant=%s key=%s error=%s", restaurant_id, key, e)
        raise HTTPException(status_code=502, detail="Image upload failed")
    return public_url(key)


async def discard_menu_image(url: str) -> None:
    """Best-effort removal of an image we no longer reference"""
    if not url or not is_managed_url(url):
        return
    try:
        await delete_object(url)
    except (BotoCoreError, ClientError, RuntimeError) as e:
        log.warning("failed to delete old menu image: url=%s error=%s", url, e)
