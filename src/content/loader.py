# src/content/loader.py — v2
"""Content loader: Source -> Validator -> Cache Store.

Every consumer goes through ContentLoader.load(path, validator). Failures of
any kind come back as Invalid outcomes; nothing raises past this module.
Invalid outcomes are cached like valid ones and are only retried after an
explicit invalidate().
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, TypeVar

from sitecontent.cache.base_cache_store import BaseCacheStore, LoadTicket
from sitecontent.cache.models import CacheStats, EntryState, FieldError, Invalid, Outcome, Valid
from sitecontent.content.base_source import (
    BaseContentSource,
    SourceNotFoundError,
    SourceParseError,
)
from sitecontent.content.validator import SchemaValidator
from sitecontent.logging.context import reset_content_context, set_content_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContentLoader:
    """Loads, validates and caches configuration documents.

    Args:
        source: Where raw documents come from.
        store: Cache store holding one outcome per logical path.
        cache_enabled: When False every load re-reads and re-validates
            (development hot-reload); the store is left untouched.
    """

    def __init__(
        self,
        source: BaseContentSource,
        store: BaseCacheStore,
        *,
        cache_enabled: bool = True,
    ) -> None:
        self._source = source
        self._store = store
        self._cache_enabled = cache_enabled
        # Strong references to running fetches; the event loop only keeps weak ones.
        self._tasks: set[asyncio.Task[Outcome]] = set()

    @property
    def source(self) -> BaseContentSource:
        return self._source

    @property
    def store(self) -> BaseCacheStore:
        return self._store

    @property
    def cache_enabled(self) -> bool:
        return self._cache_enabled

    async def load(self, path: str, validator: SchemaValidator[T]) -> Valid[T] | Invalid:
        """Return the validated document at path, or an Invalid outcome."""
        if not path:
            return Invalid(
                kind="source_not_found",
                errors=(FieldError(message="Content path must not be empty"),),
            )

        if not self._cache_enabled:
            return await self._fetch_and_validate(path, validator)

        entry = self._store.get(path)
        if entry.state is EntryState.CACHED and entry.outcome is not None:
            logger.debug("Cache hit for %s", path)
            return entry.outcome

        ticket = self._store.begin_load(path)
        if ticket.is_leader:
            self._start_load(ticket, validator)
        return await ticket.wait()

    def invalidate(self, path: str) -> None:
        """Forget the outcome for path; the next load fetches and validates again."""
        self._store.reset(path)
        logger.info("Invalidated content cache for %s", path)

    def invalidate_all(self) -> None:
        """Forget every cached outcome."""
        self._store.reset_all()
        logger.info("Invalidated entire content cache")

    def stats(self) -> CacheStats:
        """Snapshot of what is cached and what is loading."""
        entries = self._store.entries()
        cached = [e.path for e in entries if e.state is EntryState.CACHED]
        loading = [e.path for e in entries if e.state is EntryState.LOADING]
        return CacheStats(
            size=len(cached),
            paths=cached,
            loading=loading,
            cache_enabled=self._cache_enabled,
        )

    def _start_load(self, ticket: LoadTicket, validator: SchemaValidator[Any]) -> None:
        """Run fetch+validate in its own task so the load completes even if the
        leader's caller is cancelled."""
        task = asyncio.get_running_loop().create_task(
            self._fetch_and_validate(ticket.path, validator)
        )
        self._tasks.add(task)

        def _finish(done: asyncio.Task[Outcome]) -> None:
            self._tasks.discard(done)
            outcome: Outcome
            if done.cancelled():
                outcome = Invalid(
                    kind="source_parse_failure",
                    errors=(FieldError(message="Load cancelled"),),
                )
            elif done.exception() is not None:
                exc = done.exception()
                outcome = Invalid(
                    kind="source_parse_failure",
                    errors=(FieldError(message=f"{type(exc).__name__}: {exc}"),),
                )
            else:
                outcome = done.result()
            self._store.complete(ticket.path, outcome, ticket)

        task.add_done_callback(_finish)

    async def _fetch_and_validate(
        self, path: str, validator: SchemaValidator[T],
    ) -> Valid[T] | Invalid:
        token = set_content_context(path)
        started = time.perf_counter()
        try:
            outcome = await self._fetch_and_validate_unlogged(path, validator)
        finally:
            reset_content_context(token)

        elapsed_ms = (time.perf_counter() - started) * 1000
        if isinstance(outcome, Invalid):
            logger.warning(
                "Content %s is invalid (%s, validator=%s): %s",
                path, outcome.kind, validator.name, outcome.summary(),
                extra={"data": {"kind": outcome.kind, "errors": outcome.error_paths()}},
            )
        else:
            logger.info(
                "Loaded content %s with %s in %.1fms", path, validator.name, elapsed_ms,
            )
        return outcome

    async def _fetch_and_validate_unlogged(
        self, path: str, validator: SchemaValidator[T],
    ) -> Valid[T] | Invalid:
        try:
            raw = await self._source.fetch(path)
        except SourceNotFoundError as e:
            return Invalid(kind="source_not_found", errors=(FieldError(message=str(e)),))
        except SourceParseError as e:
            return Invalid(kind="source_parse_failure", errors=(FieldError(message=str(e)),))
        except Exception as e:
            logger.exception("Content source failed for %s", path)
            return Invalid(
                kind="source_parse_failure",
                errors=(FieldError(message=f"{type(e).__name__}: {e}"),),
            )

        try:
            return validator.validate(raw)
        except Exception as e:
            logger.exception("Validator %s raised for %s", validator.name, path)
            return Invalid(
                kind="schema_validation",
                errors=(FieldError(message=f"{type(e).__name__}: {e}"),),
            )
