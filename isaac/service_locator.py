"""Global registry of engine services keyed by type."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

T = TypeVar("T")


class ServiceNotFoundError(RuntimeError):
    """Raised when a requested service has not been registered."""


class ServiceLocator:
    """Holds at most one instance per service type."""

    _services: ClassVar[dict[type, Any]] = {}

    @classmethod
    def register_service(cls, service_type: type[T], *args: Any, **kwargs: Any) -> T:
        """Build ``service_type(*args, **kwargs)``, register and return it."""
        service = service_type(*args, **kwargs)
        cls._services[service_type] = service
        return service

    @classmethod
    def get_service(cls, service_type: type[T]) -> T:
        """Return the registered instance of ``service_type``."""
        try:
            return cls._services[service_type]
        except KeyError:
            raise ServiceNotFoundError(
                f"service '{service_type.__name__}' not found"
            ) from None

    @classmethod
    def unregister_service(cls, service_type: type[T]) -> T | None:
        """Forget ``service_type`` and return the instance that was registered."""
        return cls._services.pop(service_type, None)