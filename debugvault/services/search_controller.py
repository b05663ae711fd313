"""Search Controller: debounced search over the current user's data.

Invariants:
    - Collaborators injected at construction; no module-level client
    - A blank query resets results to empty without touching identity or repository
    - Each keystroke or filter change supersedes the pending search (Debouncer)
    - Results from a superseded run are never published over a newer one
    - A data source failure keeps the previous results and is stored in last_error

Design Decisions:
    - Query and filters are transient state held here, the engine stays pure
    - Listeners are plain callables receiving the new SearchResults
"""

import logging
from collections.abc import Callable

from debugvault.config import get_settings
from debugvault.core.errors import DataSourceError
from debugvault.core.repository_protocols import DebugDataRepository, IdentityProvider
from debugvault.core.search_engine import search
from debugvault.schemas.search import SearchFilters, SearchResults
from debugvault.services.debounce import Debouncer
from debugvault.services.user_data import fetch_user_collections

logger = logging.getLogger(__name__)

ResultsListener = Callable[[SearchResults], None]


class SearchController:
    """Holds the search box state and runs the engine when input settles."""

    def __init__(
        self,
        identity: IdentityProvider,
        repository: DebugDataRepository,
        debounce_seconds: float | None = None,
    ):
        if debounce_seconds is None:
            debounce_seconds = get_settings().search_debounce_ms / 1000
        self._identity = identity
        self._repository = repository
        self._debouncer = Debouncer(debounce_seconds, self.run)
        self._listeners: list[ResultsListener] = []
        self._generation = 0

        self.query = ""
        self.filters = SearchFilters()
        self.results = SearchResults()
        self.loading = False
        self.last_error: DataSourceError | None = None

    # ─── State changes ──────────────────────────────────────────

    def set_query(self, text: str) -> None:
        self.query = text
        self._debouncer.trigger()

    def set_filters(self, filters: SearchFilters) -> None:
        self.filters = filters
        self._debouncer.trigger()

    def clear_filters(self) -> None:
        self.set_filters(self.filters.cleared())

    def reset(self) -> None:
        """Navigation away: forget query, filters and results."""
        self._debouncer.cancel()
        self._generation += 1
        self.query = ""
        self.filters = SearchFilters()
        self.loading = False
        self.last_error = None
        self._publish(SearchResults())

    def subscribe(self, listener: ResultsListener) -> Callable[[], None]:
        """Register a results listener; returns the unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def debounce_seconds(self) -> float:
        return self._debouncer.delay_seconds

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    async def wait_idle(self) -> None:
        """Wait for the pending and in-flight searches to finish."""
        await self._debouncer.wait()

    # ─── Execution ──────────────────────────────────────────────

    async def run(self) -> SearchResults:
        """Search now with the current query and filters."""
        self._generation += 1
        generation = self._generation
        query, filters = self.query, self.filters

        if not query.strip():
            self.loading = False
            self.last_error = None
            self._publish(SearchResults())
            return self.results

        self.loading = True
        try:
            data = await fetch_user_collections(
                self._identity, self._repository, "search",
            )
        except DataSourceError as exc:
            if generation == self._generation:
                self.last_error = exc
            logger.warning(
                "Search failed", exc_info=exc,
                extra={"error_code": exc.code, "operation": exc.operation},
            )
            return self.results
        finally:
            if generation == self._generation:
                self.loading = False

        results = search(query, filters, data.sessions, data.snippets, data.errors)
        if generation != self._generation:
            logger.debug("Discarding superseded search", extra={"query": query})
            return results

        self.last_error = None
        self._publish(results)
        logger.info(
            "Search completed",
            extra={
                "user_id": data.user_id, "query": query,
                "total_count": results.total_count,
            },
        )
        return results

    def _publish(self, results: SearchResults) -> None:
        self.results = results
        for listener in list(self._listeners):
            listener(results)
