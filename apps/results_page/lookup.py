# apps/results_page/lookup.py

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from apps.results_page.selectors import Candidate
from apps.utils.errors import LookupFailure

logger = logging.getLogger(__name__)


def get_directory(kind):
    """Resolve the configured catalog callable for a selector kind."""
    return import_string(settings.SELECTOR_DIRECTORIES[kind.value])


def search(kind, query):
    """
    Returns the candidates of ``kind`` whose label contains ``query``.

    An empty query returns the whole catalog. Matching ignores case and keeps
    the catalog's own order; no match is an empty list, not an error.
    """
    try:
        records = list(get_directory(kind)())
        candidates = [Candidate.from_record(kind, record) for record in records]
    except Exception as e:
        logger.error(f"{kind.value} directory lookup failed: {e}")
        raise LookupFailure(f"{kind.value} search is unavailable: {e}") from e

    if not query:
        return candidates

    needle = query.casefold()
    return [c for c in candidates if needle in c.label.casefold()]
