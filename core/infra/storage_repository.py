from loguru import logger

from core.services.internal.api_client import APIClient, APIClientHTTPError, APIClientTransportError


class HTTPStorageRepository(APIClient):
    def public_url(self, bucket: str, path: str) -> str:
        return self._storage(f"object/public/{bucket}/{path}")

    async def upload(self, bucket: str, path: str, content: bytes, content_type: str) -> bool:
        status, _ = await self._api_request(
            "post",
            self._storage(f"object/{bucket}/{path}"),
            body_bytes=content,
            headers={"Content-Type": content_type, "x-upsert": "true"},
        )
        if status in (200, 201):
            logger.info(f"Uploaded object bucket={bucket} path={path} size={len(content)}")
            return True
        logger.error(f"Upload failed bucket={bucket} path={path}. HTTP={status}")
        return False

    async def list_objects(self, bucket: str, prefix: str) -> list[str]:
        try:
            status, data = await self._api_request(
                "post",
                self._storage(f"object/list/{bucket}"),
                {"prefix": prefix, "limit": 100, "offset": 0},
            )
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Listing objects failed bucket={bucket} prefix={prefix}: {exc}")
            return []
        if status != 200 or not isinstance(data, list):
            return []
        names = [str(item.get("name") or "") for item in data if isinstance(item, dict)]
        return [f"{prefix}/{name}" for name in names if name]

    async def remove(self, bucket: str, paths: list[str]) -> bool:
        if not paths:
            return True
        try:
            status, _ = await self._api_request("delete", self._storage(f"object/{bucket}"), {"prefixes": paths})
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Removing objects failed bucket={bucket} count={len(paths)}: {exc}")
            return False
        return status in (200, 204)


__all__ = ["HTTPStorageRepository"]
