"""Host command entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from ..application.ports.boundary_selector import BoundarySelector
from ..application.ports.event_publisher import EventPublisher, SimpleEventPublisher
from ..application.ports.geometry_store import GeometryStore
from ..application.ports.message_sink import MessageLog, MessageSink
from ..application.services.block_extraction import BlockExtractionService
from ..config import COMMAND_NAME
from ..domain.entities.result import ExtractionResult
from ..domain.value_objects.config import ExtractionConfig
from ..exceptions import ConfigurationError
from ..infrastructure.plugin_registry import PluginRegistry

logger = logging.getLogger(__name__)


@dataclass
class HostSession:
    """What the host hands a command: its document store and prompt/echo ports.

    A host binding that registers its store under the
    ``block_extractor.stores`` entry-point group can pass ``backend``
    instead of an open store; the store is created on first use.
    """
    store: GeometryStore | None
    selector: BoundarySelector
    backend: str | None = None
    messages: MessageSink = field(default_factory=MessageLog)
    events: EventPublisher = field(default_factory=SimpleEventPublisher)
    config: ExtractionConfig = field(default_factory=ExtractionConfig)

    def open_store(self) -> GeometryStore | None:
        """Return the session store, creating it from ``backend`` if needed.

        Raises:
            ConfigurationError: If ``backend`` names no known store
        """
        if self.store is None and self.backend is not None:
            self.store = PluginRegistry.create_store(self.backend)
            logger.info(f"Opened {self.store.name} store")
        return self.store


CommandHandler = Callable[[HostSession], ExtractionResult]

_COMMANDS: dict[str, CommandHandler] = {}


def command(name: str) -> Callable[[CommandHandler], CommandHandler]:
    """Register a function as a host command."""
    def decorator(func: CommandHandler) -> CommandHandler:
        _COMMANDS[name] = func
        return func
    return decorator


@command(COMMAND_NAME)
def create_block_from_cube(session: HostSession) -> ExtractionResult:
    """Turn a boundary solid and everything inside it into a block."""
    store = session.open_store()
    if store is None:
        # No active document
        return ExtractionResult.cancelled()

    service = BlockExtractionService(
        store=store,
        selector=session.selector,
        messages=session.messages,
        config=session.config,
        events=session.events
    )
    return service.run()


def list_commands() -> list[str]:
    return sorted(_COMMANDS)


def invoke(name: str, session: HostSession) -> ExtractionResult:
    """Run a registered command by name (case-insensitive, like host commands).

    Raises:
        ConfigurationError: If no command has that name
    """
    for registered, handler in _COMMANDS.items():
        if registered.lower() == name.lower():
            logger.debug(f"Invoking command {registered}")
            return handler(session)
    raise ConfigurationError(f"Unknown command: {name}", config_key="command")
