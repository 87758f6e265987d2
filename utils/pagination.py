"""Helpers for walking every page of a list operation."""

import logging

from config.settings import DEFAULT_PER_PAGE
from models.options import ListOptions

logger = logging.getLogger(__name__)


def iterate_pages(list_func, *args, options=None, per_page=DEFAULT_PER_PAGE, max_pages=None):
    """Yield items from every page of a list operation.

    Args:
        list_func: a service list method, e.g.
            ``client.external_status_checks.list_project_status_checks``
        *args: positional arguments placed before the options argument
        options (ListOptions, optional): starting page and page size
        per_page (int): page size used when ``options`` does not set one
        max_pages (int, optional): stop after this many pages

    Pages are followed through the ``X-Next-Page`` header until it is empty.
    """
    page_options = ListOptions(
        page=options.page if options and options.page else 1,
        per_page=options.per_page if options and options.per_page else per_page,
    )
    pages_read = 0

    while True:
        items, response = list_func(*args, page_options)
        pages_read += 1
        logger.debug("Read page %s with %s item(s)", page_options.page, len(items))

        yield from items

        if not response.next_page or not items:
            break
        if max_pages is not None and pages_read >= max_pages:
            break
        page_options = page_options.model_copy(update={'page': response.next_page})


def collect_pages(list_func, *args, **kwargs):
    """Return the items of every page as a single list."""
    return list(iterate_pages(list_func, *args, **kwargs))
