import pytest

from apps.page_client.page import PageController
from apps.results_page.selectors import Candidate, SelectorKind
from apps.utils.errors import LookupFailure, NetworkFailure

FRAGMENT_HEADER = {'HTTP_X_REQUESTED_WITH': 'XMLHttpRequest'}


class DjangoClientTransport:
    """Routes the page client through Django's test client instead of the network."""

    def __init__(self, client):
        self.client = client
        self.fragment_calls = []

    def _text(self, response):
        if response.status_code != 200:
            raise NetworkFailure(response.content.decode('utf-8'), status=response.status_code)
        return response.content.decode('utf-8')

    def fetch_page(self, pair=None):
        params = pair.as_params() if pair is not None else {}
        return self._text(self.client.get('/', params))

    def fetch_fragment(self, pair):
        self.fragment_calls.append(pair)
        return self._text(self.client.get('/', pair.as_params(), **FRAGMENT_HEADER))

    def lookup(self, kind, query):
        response = self.client.get(kind.lookup_path, {'name': query})
        if response.status_code != 200:
            raise LookupFailure(f"{kind.value} search answered {response.status_code}")
        return [Candidate.from_record(kind, record) for record in response.json()]


class FakeTransport:
    """
    In-memory transport with hooks that run while a call is "pending", so
    tests can close dialogs or confirm again mid-request.
    """

    def __init__(self):
        self.catalogs = {
            SelectorKind.EVENT: [
                Candidate('1', '春季交流会 2024'),
                Candidate('5', '年末ライブ配信'),
            ],
            SelectorKind.USER: [
                Candidate('101', '田中 太郎'),
                Candidate('102', '鈴木 一郎'),
                Candidate('301', '田中 次郎'),
            ],
        }
        self.lookup_calls = []
        self.fragment_calls = []
        self.lookup_error = None
        self.fragment_error = None
        self.on_lookup = None
        self.on_fragment = None

    def fetch_page(self, pair=None):
        raise AssertionError("FakeTransport does not serve full pages")

    def lookup(self, kind, query):
        self.lookup_calls.append((kind, query))
        if self.on_lookup is not None:
            self.on_lookup()
        if self.lookup_error is not None:
            raise self.lookup_error
        needle = query.casefold()
        return [c for c in self.catalogs[kind] if needle in c.label.casefold()]

    def fetch_fragment(self, pair):
        self.fragment_calls.append(pair)
        if self.on_fragment is not None:
            self.on_fragment()
        if self.fragment_error is not None:
            raise self.fragment_error
        return f"<table><tr><td>{pair.event.value}/{pair.user.value}</td></tr></table>"


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def transitions():
    return []


@pytest.fixture
def page(fake_transport, transitions):
    return PageController(
        fake_transport,
        on_transition=lambda kind, old, new: transitions.append((kind, old, new)),
    )


@pytest.fixture
def django_transport(client):
    return DjangoClientTransport(client)
