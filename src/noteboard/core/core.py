from __future__ import annotations

import importlib
import threading
from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING, cast

from noteboard.config import Config
from noteboard.core.modules.relationship.service import AdjacentIdRelationships, RelationshipQuery

if TYPE_CHECKING:
    from noteboard.core.modules.access.service import AccessService
    from noteboard.core.modules.comment.service import CommentService
    from noteboard.core.modules.counter.service import CounterService
    from noteboard.core.modules.note.service import NoteService


class Service:
    """Base class for services owning a slice of in-memory state."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self._core: Core | None = None

    def on_start(self) -> None:
        """Initialize service on application startup."""

    def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    counter: CounterService
    access: AccessService
    note: NoteService
    comment: CommentService

    def __init__(self, config: Config) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        # Order matters for initialization - counter must be first
        service_configs = [
            ("counter", "noteboard.core.modules.counter.service", "CounterService"),
            ("access", "noteboard.core.modules.access.service", "AccessService"),
            ("note", "noteboard.core.modules.note.service", "NoteService"),
            ("comment", "noteboard.core.modules.comment.service", "CommentService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(config)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    def start_all(self) -> None:
        for service in self._services:
            service.on_start()

    def stop_all(self) -> None:
        for service in self._services:
            service.on_stop()


class Core:
    """Container providing config, the relationship graph, and all service instances."""

    config: Config
    relationships: RelationshipQuery
    services: Services

    def __init__(self, config: Config, relationships: RelationshipQuery | None = None) -> None:
        """Initialize core with config and auto-register services.

        When no relationship graph is given, the numeric-adjacency stand-in is used.
        """
        self.config = config
        self.relationships = relationships if relationships is not None else AdjacentIdRelationships()
        self.services = Services(config)
        self.services.set_core(self)
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Generator[None]:
        """Run a whole operation under the per-instance lock."""
        with self._lock:
            yield

    @contextmanager
    def lifespan(self) -> Generator[None]:
        """Manage application lifecycle - startup and shutdown."""
        self.services.start_all()
        try:
            yield
        finally:
            self.services.stop_all()
