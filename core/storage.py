# core/storage.py

import re
import uuid
from typing import Optional

from core.errors import StoreFailure, store_failure
from core.logging_config import logger


# -----------------------------------------------------
# Filename sanitizer
# -----------------------------------------------------
def safe_filename(filename: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]", "_", filename)


def generate_object_key(filename: str) -> str:
    """uuid-based key that keeps the original extension."""
    name = safe_filename(filename or "")
    ext = name.rsplit(".", 1)[-1] if "." in name else ""
    return f"{uuid.uuid4()}.{ext}" if ext else str(uuid.uuid4())


class ResourceStorage:
    """
    Object storage for downloadable resource files (Supabase Storage).
    Upload returns a public retrieval URL; delete works by key.
    """

    def __init__(self, client, bucket: str):
        self.client = client
        self.bucket = bucket

    def _bucket(self):
        if self.client is None:
            raise StoreFailure("Supabase client not configured")
        return self.client.storage.from_(self.bucket)

    def upload(self, key: str, content: bytes, content_type: Optional[str] = None) -> str:
        options = {"cache-control": "3600", "upsert": "true"}
        if content_type:
            options["content-type"] = content_type

        try:
            self._bucket().upload(key, content, file_options=options)
            public_url = self._bucket().get_public_url(key)
        except Exception as e:
            raise store_failure(e, f"Failed to upload {key} to {self.bucket}") from e

        if not public_url:
            raise StoreFailure(f"Failed to get public URL for {key}")

        logger.info(f"Uploaded {key} to bucket {self.bucket}")
        return public_url

    def delete(self, key: str):
        try:
            self._bucket().remove([key])
        except Exception as e:
            raise store_failure(e, f"Failed to delete {key} from {self.bucket}") from e

        logger.info(f"Deleted {key} from bucket {self.bucket}")

    def key_from_url(self, url: Optional[str]) -> Optional[str]:
        """
        Object key for a URL that points into this bucket.
        External links (premium resources) return None.
        """
        if not url:
            return None

        marker = f"{self.bucket}/"
        if marker not in url:
            return None

        key = url.split(marker, 1)[1].split("?", 1)[0]
        return key or None
