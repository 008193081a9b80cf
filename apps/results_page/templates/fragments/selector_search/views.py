from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

from apps.results_page import lookup
from apps.results_page.selectors import SelectorKind
from apps.utils.errors import LookupFailure


def _search_response(request, kind):
    query = request.GET.get('name', '')

    try:
        candidates = lookup.search(kind, query)
    except LookupFailure as e:
        return JsonResponse({'error': str(e)}, status=502, json_dumps_params={'ensure_ascii': False})

    records = [candidate.to_record(kind) for candidate in candidates]
    return JsonResponse(records, safe=False, json_dumps_params={'ensure_ascii': False})


@never_cache
@require_GET
def search_events(request):
    """API for the event dialog: [{eventno, eventname}, ...]."""
    return _search_response(request, SelectorKind.EVENT)


@never_cache
@require_GET
def search_users(request):
    """API for the user dialog: [{userno, username}, ...]."""
    return _search_response(request, SelectorKind.USER)
