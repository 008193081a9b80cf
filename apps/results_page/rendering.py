# apps/results_page/rendering.py

from django.conf import settings
from django.template.loader import render_to_string
from django.urls import reverse
from django.utils.module_loading import import_string
from django.utils.safestring import mark_safe

from apps.results_page.selectors import SelectorKind
from apps.utils.errors import RenderFailure

PAGE_TEMPLATE = 'results_page.html'
FRAGMENT_TEMPLATE = 'fragments/results_table/results_table_content.html'
DIALOG_TEMPLATE = 'fragments/selector_search/search_dialog.html'

DIALOG_TITLES = {
    SelectorKind.EVENT: 'イベント検索',
    SelectorKind.USER: 'ユーザー検索',
}


def load_results(selectors):
    """Calls the results provider with the event value first, then the user value."""
    try:
        provider = import_string(settings.SELECTOR_RESULTS_PROVIDER)
        return list(provider(selectors.event.value, selectors.user.value))
    except Exception as e:
        raise RenderFailure(f"Could not load results for {selectors.as_params()}: {e}") from e


def _render(template_name, context, request=None):
    try:
        return render_to_string(template_name, context, request=request)
    except Exception as e:
        raise RenderFailure(f"Could not render {template_name}: {e}") from e


def render_fragment(selectors, request=None):
    """Renders only the results table for the pair, with no page scaffolding."""
    rows = load_results(selectors)
    return _render(FRAGMENT_TEMPLATE, {'rows': rows}, request)


def _dialog_context(kind, selectors):
    return {
        'kind': kind.value,
        'title': DIALOG_TITLES[kind],
        'lookup_url': reverse(f'search_{kind.value}s'),
        'initial_value': selectors.get(kind).value,
    }


def render_full_page(selectors, request=None):
    """
    Renders the whole page for the pair.

    The results table is the exact string render_fragment() produces, so a
    fragment swapped in later matches what the page embeds.
    """
    fragment = render_fragment(selectors, request=request)

    dialogs = [
        mark_safe(_render(DIALOG_TEMPLATE, _dialog_context(kind, selectors), request))
        for kind in SelectorKind
    ]

    context = {
        'event_id': selectors.event.value,
        'user_no': selectors.user.value,
        'results_fragment': mark_safe(fragment),
        'dialogs': dialogs,
        'request_timeout_ms': settings.SELECTOR_REQUEST_TIMEOUT_MS,
        'page_url': reverse('results_page'),
    }
    return _render(PAGE_TEMPLATE, context, request)
