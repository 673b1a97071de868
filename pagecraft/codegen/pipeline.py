"""Per-page fan-out shared by the site and project exporters.

Pages are independent, so they can be rendered on a thread pool.  The
policy is commit-only: results are returned only when every page
succeeded and no cancellation was observed.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

from ..errors import ExportCancelledError, PageCraftError, PageExportError
from ..model import SitePage
from ..observability import log_export_event

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _PageSkipped(Exception):
    """Internal marker: the page was not started because of cancellation."""


def _cancelled(target: str, completed: Sequence[str], total: int) -> ExportCancelledError:
    log_export_event(
        "export_cancelled",
        level=logging.WARNING,
        target=target,
        completed=len(completed),
        total=total,
    )
    return ExportCancelledError(
        f"Export cancelled after {len(completed)} of {total} pages",
        completed=completed,
    )


def render_pages(
    pages: Sequence[SitePage],
    render: Callable[[SitePage], T],
    *,
    max_workers: int = 1,
    cancel_event: Optional[threading.Event] = None,
    target: str = "static",
) -> List[T]:
    """Render every page with ``render`` and return results in page order.

    Raises:
        ExportCancelledError: if ``cancel_event`` was set before a page
            started or before the results were committed.
        PageExportError: if rendering a page failed unexpectedly.
        PageCraftError: any library error raised by ``render`` is re-raised.
    """

    def _run(page: SitePage) -> T:
        if cancel_event is not None and cancel_event.is_set():
            raise _PageSkipped(page.page_name)
        try:
            result = render(page)
        except PageCraftError:
            raise
        except Exception as exc:
            raise PageExportError(
                f"Failed to generate page '{page.page_name}': {exc}",
                page_name=page.page_name,
            ) from exc
        log_export_event("page_rendered", level=logging.DEBUG, target=target, page=page.page_name)
        return result

    results: List[T] = []
    completed: List[str] = []

    if max_workers <= 1 or len(pages) <= 1:
        for page in pages:
            try:
                results.append(_run(page))
            except _PageSkipped:
                raise _cancelled(target, completed, len(pages)) from None
            completed.append(page.page_name)
    else:
        workers = min(max_workers, len(pages))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pagecraft-export") as executor:
            futures = [executor.submit(_run, page) for page in pages]
        skipped = False
        failure: Optional[BaseException] = None
        for page, future in zip(pages, futures):
            error = future.exception()
            if error is None:
                results.append(future.result())
                completed.append(page.page_name)
            elif isinstance(error, _PageSkipped):
                skipped = True
            elif failure is None:
                failure = error
        if failure is not None:
            raise failure
        if skipped:
            raise _cancelled(target, completed, len(pages))

    if cancel_event is not None and cancel_event.is_set():
        raise _cancelled(target, completed, len(pages))
    return results


__all__ = ["render_pages"]
