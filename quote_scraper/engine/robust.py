"""Multi-source resolution engine.

Sources are visited in a fresh random order on every call. Each visit
contributes whatever attributes it can; results are merged so that the
first value found for an attribute is kept. Traversal stops as soon as
every requested attribute has a value.
"""

import itertools
import logging
import random
from collections.abc import Iterable, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Protocol

from quote_scraper.errors import ScrapeError
from quote_scraper.models.result import ResolutionMap, coalesce, empty_resolution, is_complete
from quote_scraper.models.source import SourceDescriptor
from quote_scraper.models.stock import AttributeId, Stock

from .resolver import DocumentProvider, resolve_from_source


logger = logging.getLogger(__name__)


class Shuffler(Protocol):
    def shuffle(self, x: list[int]) -> None: ...


def visit_order(count: int, rng: Shuffler | None = None) -> list[int]:
    """Return a random permutation of ``range(count)``."""
    order = list(range(count))
    (rng or random).shuffle(order)
    return order


def resolve_all(
    stock: Stock,
    sources: Sequence[SourceDescriptor],
    attributes: Iterable[AttributeId],
    provider: DocumentProvider,
    *,
    rng: Shuffler | None = None,
    max_workers: int = 1,
) -> ResolutionMap:
    """Resolve attributes for a stock across several sources.

    Never raises for source failures: a source that cannot be fetched is
    skipped, and an attribute no source could supply keeps its last error.

    Args:
        stock: Stock to look up
        sources: Candidate sources
        attributes: Attributes to resolve
        provider: Document provider used for every source visit
        rng: Randomness for the visiting order (default: ``random`` module)
        max_workers: Number of sources fetched in parallel (1 = sequential)

    Returns:
        Map with exactly one entry per requested attribute
    """
    requested = list(dict.fromkeys(attributes))
    resolution = empty_resolution(requested)
    order = visit_order(len(sources), rng)

    if max_workers > 1 and len(order) > 1:
        _resolve_concurrently(stock, sources, order, requested, provider, resolution, max_workers)
    else:
        _resolve_sequentially(stock, sources, order, requested, provider, resolution)

    resolved = sum(1 for result in resolution.values() if result.ok)
    logger.info(f"{stock}: resolved {resolved}/{len(resolution)} attributes")
    return resolution


def _visit(
    stock: Stock,
    source: SourceDescriptor,
    requested: list[AttributeId],
    provider: DocumentProvider,
) -> ResolutionMap | None:
    """Visit one source, returning None if the whole source failed."""
    try:
        return resolve_from_source(stock, source, requested, provider)
    except ScrapeError as e:
        logger.warning(f"{source.name} skipped for {stock}: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error from {source.name} for {stock}: {e}")
    return None


def _resolve_sequentially(
    stock: Stock,
    sources: Sequence[SourceDescriptor],
    order: list[int],
    requested: list[AttributeId],
    provider: DocumentProvider,
    resolution: ResolutionMap,
) -> None:
    for position, index in enumerate(order):
        if is_complete(resolution):
            logger.debug(f"{stock}: complete, skipping {len(order) - position} remaining sources")
            return

        found = _visit(stock, sources[index], requested, provider)
        if found is not None:
            coalesce(resolution, found)


def _resolve_concurrently(
    stock: Stock,
    sources: Sequence[SourceDescriptor],
    order: list[int],
    requested: list[AttributeId],
    provider: DocumentProvider,
    resolution: ResolutionMap,
    max_workers: int,
) -> None:
    # Results are merged by this thread only. At most ``workers`` visits are
    # in flight and no new visit starts once the map is complete.
    if is_complete(resolution):
        return

    workers = min(max_workers, len(order))
    remaining = iter(order)
    pending: set[Future] = set()

    # Leaving the block waits for in-flight visits, so none outlives this call
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="quote_source") as executor:
        for index in itertools.islice(remaining, workers):
            pending.add(executor.submit(_visit, stock, sources[index], requested, provider))

        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                found = future.result()
                if found is not None:
                    coalesce(resolution, found)

            if is_complete(resolution):
                logger.debug(f"{stock}: complete, discarding {len(pending)} in-flight sources")
                for future in pending:
                    future.cancel()
                return

            for index in itertools.islice(remaining, workers - len(pending)):
                pending.add(executor.submit(_visit, stock, sources[index], requested, provider))
