"""Block extraction service - orchestrates the extraction state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from ...domain.entities.entity import Definition, EntityId, Label
from ...domain.entities.result import ExtractionResult
from ...domain.services.containment import collect_contents
from ...domain.services.label_resolution import resolve_label
from ...domain.value_objects.config import ExtractionConfig
from ...domain.value_objects.entity_kind import EntityKind
from ...domain.value_objects.geometry import Extents
from ...exceptions import DuplicateDefinitionError
from ..ports.boundary_selector import BoundarySelector
from ..ports.event_publisher import (
    EventPublisher, ExtractionEvent, ExtractionStage, SimpleEventPublisher
)
from ..ports.geometry_store import GeometryStore, Transaction
from ..ports.message_sink import MessageLog, MessageSink
from .definition_builder import build_definition
from .substitution import substitute

logger = logging.getLogger(__name__)


@dataclass
class ExtractionContext:
    """Context passed through the transactional steps."""
    boundary_id: EntityId
    config: ExtractionConfig
    transaction: Transaction
    stage: ExtractionStage = ExtractionStage.SELECT_BOUNDARY
    region: Extents | None = None
    label: Label | None = None
    contents: list[EntityId] = field(default_factory=list)
    definition: Definition | None = None
    instance_id: EntityId | None = None
    erased_ids: tuple[EntityId, ...] = ()
    # Set by a step to stop the run with an expected outcome
    result: ExtractionResult | None = None

    @property
    def block_name(self) -> str | None:
        return self.label.name if self.label else None


class ExtractionStep:
    """Base class for extraction steps."""

    stage: ExtractionStage

    def __init__(self, store: GeometryStore):
        self._store = store

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        """Execute this step and return updated context."""
        raise NotImplementedError


class ResolveLabelStep(ExtractionStep):
    """Read the boundary extents and find the title at its min corner."""

    stage = ExtractionStage.RESOLVE_LABEL

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        ctx.region = self._store.get_extents(ctx.boundary_id)
        candidates = self._store.iter_entities(
            kind=EntityKind.TEXT, layer=ctx.config.marker_layer
        )
        ctx.label = resolve_label(candidates, ctx.region.min_point, ctx.config.tolerance)

        if ctx.label is None:
            logger.warning(
                f"No title on layer '{ctx.config.marker_layer}' at {ctx.region.min_point}"
            )
            ctx.result = ExtractionResult.label_not_found(ctx.config.marker_layer)
        else:
            logger.info(f"Resolved block name '{ctx.label.name}' from entity {ctx.label.entity_id}")
        return ctx


class ValidateNameStep(ExtractionStep):
    stage = ExtractionStage.VALIDATE_NAME

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        if self._store.has_definition(ctx.label.name):
            logger.warning(f"Block '{ctx.label.name}' already exists")
            ctx.result = ExtractionResult.duplicate_name(ctx.label.name)
        return ctx


class QueryContentsStep(ExtractionStep):
    stage = ExtractionStage.QUERY_CONTENTS

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        crossing = self._store.select_crossing(ctx.region)
        ctx.contents = collect_contents(crossing, ctx.boundary_id, ctx.label.entity_id)
        logger.info(f"Found {len(ctx.contents)} entities inside the boundary")
        return ctx


class BuildDefinitionStep(ExtractionStep):
    stage = ExtractionStage.BUILD_DEFINITION

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        ctx.definition = build_definition(
            self._store,
            ctx.label.name,
            ctx.region.min_point,
            [ctx.boundary_id, *ctx.contents]
        )
        return ctx


class SubstituteStep(ExtractionStep):
    stage = ExtractionStage.SUBSTITUTE

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        erase_ids = (ctx.boundary_id, ctx.label.entity_id, *ctx.contents)
        ctx.instance_id = substitute(
            self._store, ctx.label.name, ctx.region.min_point, erase_ids
        )
        ctx.erased_ids = erase_ids
        return ctx


class CommitStep(ExtractionStep):
    stage = ExtractionStage.COMMIT

    def execute(self, ctx: ExtractionContext) -> ExtractionContext:
        ctx.transaction.commit()
        return ctx


class BlockExtractionService:
    """Service for turning a boundary solid and its contents into a block.

    Each ``run()`` is independent: the service keeps no state between
    invocations, so it is ready again after any outcome.
    """

    def __init__(
        self,
        store: GeometryStore,
        selector: BoundarySelector,
        messages: MessageSink | None = None,
        config: ExtractionConfig | None = None,
        events: EventPublisher | None = None
    ):
        self._store = store
        self._selector = selector
        self._messages = messages or MessageLog()
        self._config = config or ExtractionConfig()
        self._events = events or SimpleEventPublisher()
        self._pipeline = self._build_pipeline()

    @property
    def config(self) -> ExtractionConfig:
        return self._config

    def _build_pipeline(self) -> list[ExtractionStep]:
        """Build the transactional part of the state machine."""
        return [
            ResolveLabelStep(self._store),
            ValidateNameStep(self._store),
            QueryContentsStep(self._store),
            BuildDefinitionStep(self._store),
            SubstituteStep(self._store),
            CommitStep(self._store),
        ]

    def run(self) -> ExtractionResult:
        """Run one extraction and report its outcome to the session.

        Returns:
            Extraction result; never raises for store or selection faults
        """
        result = self._execute()
        if result.message:
            self._messages.write_message(result.message)
        return result

    def _execute(self) -> ExtractionResult:
        ctx: ExtractionContext | None = None
        try:
            self._publish(ExtractionStage.SELECT_BOUNDARY, "Selecting boundary")
            selection = self._selector.select_entity(
                self._config.boundary_prompt,
                self._config.boundary_kinds,
                self._config.boundary_reject_message
            )
            if not selection.is_ok:
                logger.debug("Boundary selection cancelled")
                return ExtractionResult.cancelled()

            with self._store.transaction() as tx:
                ctx = ExtractionContext(
                    boundary_id=selection.entity_id,
                    config=self._config,
                    transaction=tx
                )
                for step in self._pipeline:
                    ctx.stage = step.stage
                    self._publish(step.stage, f"Executing {step.stage.value}", ctx.block_name)
                    ctx = step.execute(ctx)
                    if ctx.result is not None:
                        # Leaving the with block rolls the transaction back
                        self._publish(ExtractionStage.ABORTED, ctx.result.status.value, ctx.block_name)
                        return ctx.result

        except DuplicateDefinitionError as e:
            logger.warning(f"Definition '{e.name}' appeared during extraction")
            self._publish(ExtractionStage.ABORTED, str(e), e.name)
            return ExtractionResult.duplicate_name(e.name)
        except Exception as e:
            stage = ctx.stage.value if ctx else ExtractionStage.SELECT_BOUNDARY.value
            logger.exception(f"Block extraction failed during {stage}")
            block_name = ctx.block_name if ctx else None
            self._publish(ExtractionStage.ABORTED, str(e), block_name)
            return ExtractionResult.failure(str(e), block_name=block_name)

        logger.info(f"Block '{ctx.block_name}' committed")
        return ExtractionResult.success_result(
            definition=ctx.definition,
            instance_id=ctx.instance_id,
            erased_ids=ctx.erased_ids
        )

    def _publish(self, stage: ExtractionStage, message: str, block_name: str | None = None) -> None:
        logger.debug(f"[{stage.value}] {message}")
        self._events.publish(ExtractionEvent(stage=stage, message=message, block_name=block_name))

    def subscribe_to_events(self, callback: Callable[[ExtractionEvent], None]) -> None:
        """Subscribe to extraction events."""
        self._events.subscribe(callback)
