# src/api/facade.py — v2
"""Public API facade: build a loader from settings and check all content.

Usage:
    from sitecontent.api.facade import create_content_loader
    loader = create_content_loader()
    outcome = await get_navigation(loader)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sitecontent.api.models import DocumentReport, ValidationSummary
from sitecontent.cache.models import Invalid
from sitecontent.config.settings import Settings
from sitecontent.content.loader import ContentLoader
from sitecontent.content.registry import CONTENT_DOCUMENTS, ContentDocument

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sitecontent.cache.base_cache_store import BaseCacheStore
    from sitecontent.content.base_source import BaseContentSource

logger = logging.getLogger(__name__)


def create_content_loader(
    settings: Settings | None = None,
    source: BaseContentSource | None = None,
    store: BaseCacheStore | None = None,
) -> ContentLoader:
    """Assemble a ContentLoader.

    Args:
        settings: Global settings. Loaded from .env if None.
        source: Content source override. Built from settings if None.
        store: Cache store override. Built from settings if None.
    """
    from sitecontent.cache.cache_factory import create_cache_store
    from sitecontent.content.source_factory import create_content_source

    settings = settings or Settings()
    loader = ContentLoader(
        source=source or create_content_source(settings),
        store=store or create_cache_store(settings),
        cache_enabled=settings.content_cache_enabled,
    )
    logger.debug(
        "Content loader ready: source=%s cache_enabled=%s",
        type(loader.source).__name__, loader.cache_enabled,
    )
    return loader


async def validate_all(
    loader: ContentLoader,
    documents: Iterable[ContentDocument] = CONTENT_DOCUMENTS,
) -> ValidationSummary:
    """Load every document through loader and report validity."""
    summary = ValidationSummary()
    for doc in documents:
        outcome = await loader.load(doc.path, doc.validator)
        if isinstance(outcome, Invalid):
            report = DocumentReport(
                name=doc.name, path=doc.path, valid=False, kind=outcome.kind,
                errors=[
                    f"{e.dotted}: {e.message}" if e.loc else e.message
                    for e in outcome.errors
                ],
            )
        else:
            report = DocumentReport(name=doc.name, path=doc.path, valid=True)
        summary.reports.append(report)

    logger.info(
        "Validated %d content documents: %d valid, %d invalid",
        summary.total, summary.valid, summary.invalid,
    )
    return summary
