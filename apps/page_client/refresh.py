from __future__ import annotations

import logging

from apps.utils.errors import NetworkFailure

logger = logging.getLogger(__name__)


class RefreshCoordinator:
    """
    Swaps a freshly rendered results fragment into the page state.

    Only one refresh runs at a time. While one is pending, `in_flight` is
    True and callers are expected to drop the new trigger.
    """

    def __init__(self, page_state, transport):
        self.page_state = page_state
        self.transport = transport
        self.in_flight = False

    def refresh(self) -> None:
        """
        Requests the fragment for the store's current pair and, on success,
        replaces the results markup and both selector displays.

        On failure nothing displayed changes and the NetworkFailure propagates.
        """
        if self.in_flight:
            raise RuntimeError("refresh() called while another refresh is pending")

        pair = self.page_state.selectors.pair()
        self.in_flight = True
        try:
            fragment = self.transport.fetch_fragment(pair)
        except NetworkFailure as e:
            logger.warning(f"Refresh for {pair.as_params()} failed: {e}")
            raise
        finally:
            self.in_flight = False

        self.page_state.results_markup = fragment
        self.page_state.show_selectors()
