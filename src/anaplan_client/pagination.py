"""Offset/limit pagination over integration API collections.

Collection endpoints return one page per request, shaped as::

    {
        "meta": {"paging": {"currentPageSize": 3, "offset": 0, "totalSize": 3}},
        "status": {...},
        "<payload key>": [...]
    }

PageAggregator requests pages with increasing ``offset`` until the server
returns an empty page (or a page limit is hit) and concatenates the payloads.
The loop is strictly sequential: the next offset depends on the size of the
previous page.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping

from loguru import logger

from .config import AnaplanClientConfig
from .exceptions import AggregationCancelledError, ProtocolError
from .models import JSONValue, PageEnvelope

type PageFetcher = Callable[..., Awaitable[object]]
type PayloadExtractor = Callable[[PageEnvelope], list[JSONValue]]


class PageAggregator:
    """Walks a paginated collection until exhaustion.

    The aggregator only holds tuning options; every ``aggregate()`` call keeps
    its own offset and accumulator, so one instance can serve concurrent calls.

    Example:
        aggregator = PageAggregator(page_size=500, payload_key="files")
        files = await aggregator.aggregate(
            client.list_files,
            {"workspace_id": "8a81b09d", "model_id": "75A40874"},
        )
    """

    def __init__(
        self,
        page_size: int = AnaplanClientConfig.DEFAULT_PAGE_SIZE,
        max_pages: int = AnaplanClientConfig.UNLIMITED_PAGES,
        payload_key: str | None = None,
        extract_payload: PayloadExtractor | None = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
            page_size: ``limit`` sent with every request (must be positive)
            max_pages: Maximum number of fetches, -1 for no limit. At least one
                fetch always happens, so 0 behaves like 1.
            payload_key: Name of the payload list in each page. When neither
                this nor extract_payload is given, the first list-valued
                field of the page is used.
            extract_payload: Callable returning the payload list of a page

        Raises:
            ValueError: If page_size is not positive or both payload_key and
                extract_payload are given
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if payload_key is not None and extract_payload is not None:
            raise ValueError("Provide either payload_key or extract_payload, not both")

        self.page_size: int = page_size
        self.max_pages: int = max_pages
        self.payload_key: str | None = payload_key
        self._extract_payload: PayloadExtractor | None = extract_payload

    def _extract(self, envelope: PageEnvelope) -> list[JSONValue]:
        if self._extract_payload is not None:
            items = self._extract_payload(envelope)
            if not isinstance(items, list):
                msg = f"Payload extractor returned {type(items).__name__}, expected list"
                raise ProtocolError(msg)
            return items
        return envelope.payload(self.payload_key)

    def _page_limit_reached(self, page_count: int) -> bool:
        if self.max_pages == AnaplanClientConfig.UNLIMITED_PAGES:
            return False
        return page_count >= self.max_pages

    async def aggregate(
        self,
        fetch_page: PageFetcher,
        params: Mapping[str, object] | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[JSONValue]:
        """Fetch every page and return the concatenated payloads.

        Args:
            fetch_page: Async callable performing one page request. It is
                called with ``params`` merged with ``limit`` and ``offset`` as
                keyword arguments and returns the decoded page (dict or
                PageEnvelope).
            params: Extra request parameters sent with every page. ``limit``
                and ``offset`` are always overridden.
            cancel_event: Checked before every fetch after the first; when set
                the aggregation stops with AggregationCancelledError.

        Returns:
            Items of all pages, in page order then in-page order

        Raises:
            ProtocolError: If a page lacks ``meta.paging``, has no payload list,
                or its ``currentPageSize`` disagrees with the payload length
            AggregationCancelledError: If cancel_event is set between pages
            Exception: Anything raised by fetch_page is propagated unchanged
        """
        base_params = dict(params or {})
        if "limit" in base_params or "offset" in base_params:
            logger.debug("Ignoring caller supplied limit/offset in paginated request")

        offset = 0
        accumulated: list[JSONValue] = []
        page_count = 0
        total_size: int | None = None

        while True:
            if page_count > 0 and cancel_event is not None and cancel_event.is_set():
                logger.info(
                    f"Pagination cancelled after {page_count} page(s) "
                    f"({len(accumulated)} items)"
                )
                raise AggregationCancelledError(accumulated, page_count)

            request = {**base_params, "limit": self.page_size, "offset": offset}
            envelope = PageEnvelope.from_response(await fetch_page(**request))

            if total_size is None:
                total_size = envelope.paging.total_size

            current_size = envelope.paging.current_page_size
            items = self._extract(envelope)
            if len(items) != current_size:
                msg = (
                    f"Malformed page response at offset {offset}: "
                    f"currentPageSize={current_size} but payload has {len(items)} items"
                )
                raise ProtocolError(msg)

            accumulated.extend(items)
            offset += current_size
            page_count += 1
            logger.debug(
                f"Fetched page {page_count}: {current_size} items "
                f"(offset {offset}/{total_size})"
            )

            if current_size == 0 or self._page_limit_reached(page_count):
                break

        logger.info(
            f"Pagination finished: {len(accumulated)} items in {page_count} page(s), "
            f"server reported {total_size}"
        )
        return accumulated


async def aggregate(
    fetch_page: PageFetcher,
    params: Mapping[str, object] | None = None,
    page_size: int = AnaplanClientConfig.DEFAULT_PAGE_SIZE,
    max_pages: int = AnaplanClientConfig.UNLIMITED_PAGES,
    *,
    payload_key: str | None = None,
    extract_payload: PayloadExtractor | None = None,
    cancel_event: asyncio.Event | None = None,
) -> list[JSONValue]:
    """Fetch all pages of a collection with a one-off PageAggregator.

    See PageAggregator.aggregate for the contract.

    Example:
        workspaces = await aggregate(client.list_workspaces, payload_key="workspaces")
    """
    aggregator = PageAggregator(
        page_size=page_size,
        max_pages=max_pages,
        payload_key=payload_key,
        extract_payload=extract_payload,
    )
    return await aggregator.aggregate(fetch_page, params, cancel_event=cancel_event)
