import asyncio
import inspect
from typing import Any, Callable

from loguru import logger

SERVICE_NAMES: frozenset[str] = frozenset({"auth", "profile", "workout", "friend", "feedback", "ai_coach"})


class _LazyService:
    """Resolves ``<name>_service`` from the container on first use and forwards calls to it.

    Every forwarded call is awaitable, including calls to synchronous methods.
    """

    def __init__(self, name: str, resolve: Callable[[], Any]) -> None:
        self._name = name
        self._resolve = resolve
        self._service: Any | None = None
        self._lock = asyncio.Lock()

    async def _instance(self) -> Any:
        if self._service is not None:
            return self._service
        async with self._lock:
            if self._service is None:
                service = self._resolve()
                if inspect.isawaitable(service):
                    service = await service
                logger.debug(f"service_resolved name={self._name} type={type(service).__name__}")
                self._service = service
        return self._service

    def __getattr__(self, method: str) -> Callable[..., Any]:
        if method.startswith("_"):
            raise AttributeError(method)

        async def forward(*args: Any, **kwargs: Any) -> Any:
            service = await self._instance()
            result = getattr(service, method)(*args, **kwargs)
            if inspect.isawaitable(result):
                return await result
            return result

        return forward


class _ServiceRegistry:
    def __init__(self) -> None:
        self._container_provider: Callable[[], Any] | None = None
        self._services: dict[str, _LazyService] = {}

    def configure(self, container_provider: Callable[[], Any]) -> None:
        self._container_provider = container_provider
        self._services.clear()

    def _lookup(self, name: str) -> _LazyService:
        service = self._services.get(name)
        if service is None:
            if self._container_provider is None:
                raise RuntimeError("Container provider is not configured")
            container = self._container_provider()
            service = _LazyService(name, getattr(container, f"{name}_service"))
            self._services[name] = service
        return service

    def __getattr__(self, name: str) -> _LazyService:
        if name in SERVICE_NAMES:
            return self._lookup(name)
        raise AttributeError(name)


APIService = _ServiceRegistry()

__all__ = ["APIService", "SERVICE_NAMES"]
