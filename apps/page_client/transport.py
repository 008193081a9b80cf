"""HTTP transport for the headless page client, built on a shared requests session."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from apps.results_page.selectors import Candidate
from apps.utils.errors import LookupFailure, NetworkFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
FRAGMENT_HEADERS = {'X-Requested-With': 'XMLHttpRequest'}
_CLIENT_AGENT = "selector-page-client/0.1"


def build_session(existing: Optional[requests.Session] = None) -> requests.Session:
    """Return a session carrying the client's User-Agent."""
    session = existing or requests.Session()
    agent = session.headers.get("User-Agent", "").strip()
    if _CLIENT_AGENT not in agent:
        session.headers["User-Agent"] = f"{agent} {_CLIENT_AGENT}".strip()
    return session


class HttpTransport:
    """Talks to a running results page over HTTP with a bounded timeout."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/') + '/'
        self.session = build_session(session)
        self.timeout = timeout

    def _get(self, path, params=None, headers=None):
        url = urljoin(self.base_url, path.lstrip('/'))
        try:
            return self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.Timeout as e:
            raise NetworkFailure(f"GET {url} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise NetworkFailure(f"GET {url} failed: {e}") from e

    def _text(self, response):
        if response.status_code != 200:
            raise NetworkFailure(
                f"Server answered {response.status_code}: {response.text.strip()}",
                status=response.status_code,
            )
        response.encoding = response.encoding or 'utf-8'
        return response.text

    def fetch_page(self, pair=None) -> str:
        """GET the full page, optionally for a given selector pair."""
        params = pair.as_params() if pair is not None else None
        return self._text(self._get('/', params=params))

    def fetch_fragment(self, pair) -> str:
        """GET the bare results fragment for the pair."""
        return self._text(self._get('/', params=pair.as_params(), headers=FRAGMENT_HEADERS))

    def lookup(self, kind, query) -> list[Candidate]:
        response = self._get(kind.lookup_path, params={'name': query})
        if response.status_code != 200:
            raise LookupFailure(f"{kind.value} search answered {response.status_code}")
        try:
            records = response.json()
            return [Candidate.from_record(kind, record) for record in records]
        except (ValueError, KeyError, TypeError) as e:
            raise LookupFailure(f"{kind.value} search returned an unreadable body: {e}") from e


__all__ = ["DEFAULT_TIMEOUT", "HttpTransport", "build_session"]
