"""Interaction controller: turns user events into fetches and view state updates."""

import asyncio
from typing import Optional, Set
from weather_widget.config import settings
from weather_widget.core.errors import WeatherFetchError, user_message
from weather_widget.core.view_state import (
    ViewState,
    apply_suggestions,
    apply_weather,
    begin_suggestions,
    begin_weather,
    clear_suggestions,
    close_suggestions,
    fail_weather,
    reveal,
    select_tab,
    set_search_text,
)
from weather_widget.core.weather_api import MIN_QUERY_LENGTH
from weather_widget.models.weather import ForecastTab, Location
import logging

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Owns the view state of one widget instance.

    Each event handler applies explicit transitions and returns the resulting
    snapshot. Suggestion and weather requests carry sequence numbers so a
    response that resolves after a newer one never overwrites fresher data.
    """

    def __init__(
        self,
        client,
        default_location: Optional[str] = None,
        days: Optional[int] = None,
        debounce_seconds: Optional[float] = None,
        reveal_delay_seconds: Optional[float] = None,
    ):
        """Initializes the controller; ``client`` is a WeatherApiClient or lookalike."""
        self.client = client
        self.default_location = default_location or settings.default_location
        self.days = days or settings.forecast_days
        self.debounce_seconds = (
            settings.debounce_seconds if debounce_seconds is None else debounce_seconds
        )
        self.reveal_delay_seconds = (
            settings.reveal_delay_seconds
            if reveal_delay_seconds is None
            else reveal_delay_seconds
        )

        self._state = ViewState()
        self._debounce_task: Optional[asyncio.Task] = None
        self._reveal_task: Optional[asyncio.Task] = None
        self._suggestion_tasks: Set[asyncio.Task] = set()

        self._suggestion_seq = 0
        self._applied_suggestion_seq = 0
        self._weather_seq = 0

    @property
    def state(self) -> ViewState:
        return self._state

    async def start(self) -> ViewState:
        """Load the fallback location shown before the user searches."""
        return await self.load_weather(self.default_location)

    async def close(self):
        """Cancel the debounce timer, reveal timer and in-flight lookups."""
        pending = [
            task
            for task in (self._debounce_task, self._reveal_task, *self._suggestion_tasks)
            if task and not task.done()
        ]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._debounce_task = None
        self._reveal_task = None
        self._suggestion_tasks.clear()

    async def wait_idle(self):
        """Wait until no timer or lookup is pending."""
        while True:
            pending = [
                task
                for task in (
                    self._debounce_task,
                    self._reveal_task,
                    *self._suggestion_tasks,
                )
                if task and not task.done()
            ]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # --- Events ---

    def on_input(self, text: str) -> ViewState:
        """Typed text: restart the debounce timer for a suggestion lookup."""
        self._state = set_search_text(self._state, text)
        self._cancel_debounce()

        if text.strip():
            self._debounce_task = asyncio.create_task(self._debounced_lookup(text))
        else:
            self._discard_pending_suggestions()
            self._state = clear_suggestions(self._state)
        return self._state

    async def submit(self) -> ViewState:
        """Enter key or search icon: fetch weather for the typed text right away."""
        text = self._state.search_text
        if len(text.strip()) < MIN_QUERY_LENGTH:
            return self._state
        return await self.load_weather(text)

    async def select_suggestion(self, location: Location) -> ViewState:
        """Suggestion click: adopt its label and fetch weather for it."""
        label = location.full_name
        self._state = close_suggestions(set_search_text(self._state, label))
        return await self.load_weather(label)

    def dismiss_suggestions(self) -> ViewState:
        """Click outside the search region."""
        self._state = close_suggestions(self._state)
        return self._state

    def select_tab(self, tab: ForecastTab) -> ViewState:
        self._state = select_tab(self._state, tab)
        return self._state

    # --- Fetch flows ---

    async def load_suggestions(self, query: str) -> ViewState:
        """Run one suggestion lookup and apply it unless a newer one already was."""
        self._suggestion_seq += 1
        seq = self._suggestion_seq
        self._state = begin_suggestions(self._state)

        locations = await self.client.fetch_suggestions(query)

        if seq <= self._applied_suggestion_seq:
            logger.debug(f"Dropping stale suggestions #{seq} for '{query}'")
            return self._state

        self._applied_suggestion_seq = seq
        self._state = apply_suggestions(self._state, locations)
        if seq != self._suggestion_seq:
            self._state = begin_suggestions(self._state)
        return self._state

    async def load_weather(self, query: str) -> ViewState:
        """Fetch weather for ``query``; failures keep the previous data on screen."""
        self._weather_seq += 1
        seq = self._weather_seq

        self._cancel_debounce()
        self._discard_pending_suggestions()
        if self._reveal_task and not self._reveal_task.done():
            self._reveal_task.cancel()
        self._state = begin_weather(self._state)

        try:
            report = await self.client.fetch_weather(query, self.days)
        except WeatherFetchError as e:
            if seq != self._weather_seq:
                return self._state
            logger.error(f"Weather fetch for '{query}' failed ({e.reason}): {e}")
            self._state = fail_weather(self._state, user_message(e))
            return self._state

        if seq != self._weather_seq:
            logger.info(f"Discarding superseded weather result for '{query}'")
            return self._state

        self._state = apply_weather(self._state, report)
        self._reveal_task = asyncio.create_task(self._reveal_after_delay(seq))
        logger.info(f"Weather updated for {report.current.location}")
        return self._state

    # --- Internals ---

    async def _debounced_lookup(self, text: str):
        await asyncio.sleep(self.debounce_seconds)
        task = asyncio.create_task(self.load_suggestions(text))
        self._suggestion_tasks.add(task)
        task.add_done_callback(self._suggestion_tasks.discard)

    async def _reveal_after_delay(self, seq: int):
        await asyncio.sleep(self.reveal_delay_seconds)
        if seq == self._weather_seq:
            self._state = reveal(self._state)

    def _cancel_debounce(self):
        if self._debounce_task and not self._debounce_task.done():
            self._debounce_task.cancel()
        self._debounce_task = None

    def _discard_pending_suggestions(self):
        """Make every in-flight suggestion response stale."""
        self._applied_suggestion_seq = self._suggestion_seq
        if self._state.fetching_suggestions:
            self._state = self._state.model_copy(update={"fetching_suggestions": False})
