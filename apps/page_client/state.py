# apps/page_client/state.py

import re
from dataclasses import dataclass, field
from html.parser import HTMLParser

from apps.results_page.selectors import SelectorKind, SelectorPair

CARRIER_IDS = {
    SelectorKind.EVENT: 'currentEventId',
    SelectorKind.USER: 'currentUserNo',
}

RESULTS_AREA_OPEN = '<div id="dataDisplayArea">'
_DIV_TAG = re.compile(r'<(/?)div\b[^>]*>', re.IGNORECASE)


class SelectorStore:
    """The two current selector values of one page session."""

    def __init__(self, pair=None):
        self._pair = pair or SelectorPair.from_params({})

    def get(self, kind):
        return self._pair.get(kind).value

    def set(self, kind, value):
        self._pair = self._pair.replace(kind, value)

    def pair(self):
        return self._pair

    def __repr__(self):
        return f"SelectorStore({self._pair.as_params()})"


@dataclass
class PageState:
    selectors: SelectorStore = field(default_factory=SelectorStore)
    results_markup: str = ''
    displayed_event: str = ''
    displayed_user: str = ''

    def show_selectors(self):
        """Copies the store values into the displayed selector texts."""
        self.displayed_event = self.selectors.get(SelectorKind.EVENT)
        self.displayed_user = self.selectors.get(SelectorKind.USER)


class _CarrierParser(HTMLParser):

    def __init__(self):
        super().__init__()
        self.carriers = {}

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == 'input' and attrs.get('id') in CARRIER_IDS.values():
            self.carriers[attrs['id']] = attrs.get('value') or ''


def extract_results_markup(html):
    """Returns the raw markup inside the results area, or '' when the page has none."""
    start = html.find(RESULTS_AREA_OPEN)
    if start == -1:
        return ''
    start += len(RESULTS_AREA_OPEN)

    depth = 1
    for match in _DIV_TAG.finditer(html, start):
        depth += -1 if match.group(1) else 1
        if depth == 0:
            return html[start:match.start()]
    return ''


def parse_full_page(html):
    """
    Reads the authoritative selector values and the embedded results
    fragment out of a full page.
    """
    parser = _CarrierParser()
    parser.feed(html)
    parser.close()

    pair = SelectorPair.from_params({
        kind.param: parser.carriers.get(carrier_id, '')
        for kind, carrier_id in CARRIER_IDS.items()
    })
    return pair, extract_results_markup(html)
