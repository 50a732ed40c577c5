"""StoresContext – dependencies built once at startup and passed to the Mall."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from wooflux.config import WoofluxSettings
from wooflux.networking import Credentials, HttpxNetwork, Network
from wooflux.observability.logging import configure_logging, get_logger
from wooflux.storage import InMemoryStorageManager, SqlAlchemyStorageManager, StorageManager
from wooflux.stores.tasks import TaskRunner

logger = get_logger(__name__)

NetworkFactory = Callable[[Credentials], Network]


@dataclasses.dataclass
class StoresContext:
    """Explicit replacement for process-wide singletons.

    Several contexts can live side by side (one per test, for instance).
    """

    settings: WoofluxSettings
    storage_manager: StorageManager
    network_factory: NetworkFactory
    tasks: TaskRunner = dataclasses.field(default_factory=TaskRunner)


def build_storage(settings: WoofluxSettings) -> StorageManager:
    if settings.storage_backend == "sqlalchemy":
        return SqlAlchemyStorageManager.from_url(settings.storage_url)
    return InMemoryStorageManager()


def build_context(
    settings: WoofluxSettings | None = None, *, setup_logging: bool = True
) -> StoresContext:
    """Wire the default collaborators described by *settings*.

    Logging is configured from ``log_level`` and ``log_json`` unless
    *setup_logging* is false (the host application owns logging then).
    """
    settings = settings or WoofluxSettings()
    if setup_logging:
        configure_logging(settings.log_level, json_output=settings.log_json)
    logger.info(
        "stores_context_built",
        storage_backend=settings.storage_backend,
        api_base_url=settings.api_base_url,
    )
    return StoresContext(
        settings=settings,
        storage_manager=build_storage(settings),
        network_factory=lambda credentials: HttpxNetwork.from_settings(credentials, settings),
    )


__all__ = ["NetworkFactory", "StoresContext", "build_context", "build_storage"]
