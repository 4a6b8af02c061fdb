"""Selection state machine for the picker and map views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

import structlog

from ..services.schemas import InfrastructureSummary
from .contracts import InfrastructureSource
from .keys import KeyAction
from .state import ActiveList, MapState, PickerState, ViewState

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoadInfrastructure:
    """Request to fetch one infrastructure and open its map."""

    infrastructure_id: int


@dataclass(frozen=True)
class ReloadPicker:
    """Request to refetch the infrastructure index and return to the picker."""


Command = Union[LoadInfrastructure, ReloadPicker]


class LoadFailedError(Exception):
    """A load request failed; the view state was left untouched."""

    def __init__(self, command: Command) -> None:
        self.command = command
        super().__init__(f"{type(command).__name__} failed")


class Navigator:
    """
    Owns the single live view state and applies key actions to it.

    ``handle_key`` mutates list selections in place and returns a command when
    the action requires a load. ``execute`` runs that command against the
    infrastructure source and swaps the state only once the load succeeded.
    From the moment a command is returned until ``execute`` finishes, keys
    are ignored.
    """

    def __init__(
        self,
        source: InfrastructureSource,
        summaries: Iterable[InfrastructureSummary] = (),
    ) -> None:
        self._source = source
        self._state: ViewState = PickerState.from_summaries(summaries)
        self._busy = False

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    def handle_key(self, action: KeyAction) -> Optional[Command]:
        if self._busy:
            logger.debug("Ignoring key while loading", action=action.value)
            return None

        command: Optional[Command] = None
        state = self._state
        if isinstance(state, PickerState):
            command = self._handle_picker_key(state, action)
        elif isinstance(state, MapState):
            command = self._handle_map_key(state, action)

        if command is not None:
            # Held until execute() finishes.
            self._busy = True
        return command

    def _handle_picker_key(self, state: PickerState, action: KeyAction) -> Optional[Command]:
        if action is KeyAction.UP:
            state.summaries.move_up()
        elif action is KeyAction.DOWN:
            state.summaries.move_down()
        elif action is KeyAction.CONFIRM:
            summary = state.summaries.selected_item()
            if summary is not None:
                return LoadInfrastructure(summary.id)
        return None

    def _handle_map_key(self, state: MapState, action: KeyAction) -> Optional[Command]:
        if action is KeyAction.SWITCH_TO_STATIONS:
            state.active = ActiveList.STATIONS
        elif action is KeyAction.SWITCH_TO_SEGMENTS:
            state.active = ActiveList.SEGMENTS
        elif action is KeyAction.UP:
            state.active_list().move_up()
        elif action is KeyAction.DOWN:
            state.active_list().move_down()
        elif action is KeyAction.BACK:
            return ReloadPicker()
        return None

    async def execute(self, command: Command) -> ViewState:
        """
        Run a load command and transition on success.

        Raises:
            LoadFailedError: If the load failed; the cause is chained and the
                current state is kept.
        """
        self._busy = True
        try:
            if isinstance(command, LoadInfrastructure):
                graph = await self._source.load_station_graph(command.infrastructure_id)
                next_state: ViewState = MapState.from_graph(graph)
            else:
                summaries = await self._source.list_infrastructures()
                next_state = PickerState.from_summaries(summaries)
        except Exception as e:
            logger.warning("Load request failed", command=repr(command), error=str(e))
            raise LoadFailedError(command) from e
        finally:
            self._busy = False

        self._state = next_state
        logger.info("View transition", view=type(next_state).__name__)
        return next_state

    async def dispatch(self, action: KeyAction) -> Optional[ViewState]:
        """Handle one key and run the resulting command, if any."""
        command = self.handle_key(action)
        if command is None:
            return None
        return await self.execute(command)
