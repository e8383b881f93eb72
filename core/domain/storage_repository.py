from typing import Protocol


class StorageRepository(Protocol):
    def public_url(self, bucket: str, path: str) -> str: ...

    async def upload(self, bucket: str, path: str, content: bytes, content_type: str) -> bool: ...

    async def list_objects(self, bucket: str, prefix: str) -> list[str]: ...

    async def remove(self, bucket: str, paths: list[str]) -> bool: ...
