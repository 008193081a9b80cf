# apps/results_page/views.py

import logging
from enum import Enum

from django.http import HttpResponse, HttpResponseServerError
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET
from django.views.decorators.vary import vary_on_headers

from apps.results_page.rendering import render_fragment, render_full_page
from apps.results_page.selectors import SelectorPair
from apps.utils.errors import RenderFailure

logger = logging.getLogger(__name__)

FRAGMENT_HEADER = 'X-Requested-With'
FRAGMENT_SENTINEL = 'XMLHttpRequest'


class RequestIntent(Enum):
    FULL = 'full'
    FRAGMENT = 'fragment'

    @classmethod
    def from_request(cls, request):
        """Decides once, at the boundary, whether the caller wants the fragment."""
        is_ajax = (
                request.headers.get(FRAGMENT_HEADER) == FRAGMENT_SENTINEL
                or request.GET.get('is_ajax') == 'true'
        )
        return cls.FRAGMENT if is_ajax else cls.FULL


@never_cache
@vary_on_headers(FRAGMENT_HEADER)
@require_GET
def results_page(request):
    """
    Shows the results table for the requested event / user pair.

    Script-initiated requests get the bare table; everything else gets the
    full page with the selector dialogs.
    """
    selectors = SelectorPair.from_params(request.GET)
    intent = RequestIntent.from_request(request)

    try:
        if intent is RequestIntent.FRAGMENT:
            body = render_fragment(selectors, request=request)
        else:
            body = render_full_page(selectors, request=request)
    except RenderFailure as e:
        logger.exception(f"Rendering {intent.value} response failed for {selectors.as_params()}")
        return HttpResponseServerError(str(e), content_type='text/plain; charset=utf-8')

    return HttpResponse(body)
