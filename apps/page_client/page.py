# apps/page_client/page.py

import logging

from apps.page_client.dialogs import SelectorDialog
from apps.page_client.refresh import RefreshCoordinator
from apps.page_client.state import PageState, SelectorStore, parse_full_page
from apps.results_page.selectors import SelectorKind
from apps.utils.errors import NetworkFailure

logger = logging.getLogger(__name__)


class PageController:
    """
    Headless rendition of the results page.

    Owns the page state, one dialog per selector kind and the single
    active-dialog slot. Every selector change goes through
    update_selector_and_refresh().
    """

    def __init__(self, transport, page_state=None, on_transition=None):
        self.transport = transport
        self.state = page_state or PageState()
        self.refresher = RefreshCoordinator(self.state, transport)
        self.on_transition = on_transition
        self.active_dialog = None
        self.dialogs = {kind: SelectorDialog(kind, self) for kind in SelectorKind}

    @property
    def selectors(self):
        return self.state.selectors

    def dialog(self, kind):
        return self.dialogs[SelectorKind(kind)]

    def load(self, pair=None):
        """Fetches the full page and seeds the store and displays from it."""
        html = self.transport.fetch_page(pair)
        current, markup = parse_full_page(html)
        self.state.selectors = SelectorStore(current)
        self.state.results_markup = markup
        self.state.show_selectors()
        return self.state

    # --- Active dialog slot ---

    def activate(self, dialog):
        if self.active_dialog is not None and self.active_dialog is not dialog:
            self.active_dialog.close()
        self.active_dialog = dialog

    def release(self, dialog):
        if self.active_dialog is dialog:
            self.active_dialog = None

    def visible_dialogs(self):
        return [d for d in self.dialogs.values() if d.visible]

    def notify_transition(self, kind, old_state, new_state):
        if self.on_transition is not None:
            self.on_transition(kind, old_state, new_state)

    # --- Selector updates ---

    def update_selector_and_refresh(self, kind, value):
        """
        Writes one selector and refreshes the results with the new pair.

        Returns False without touching anything while another refresh is
        pending. If the refresh fails the previous value is put back and the
        NetworkFailure propagates.
        """
        if self.refresher.in_flight:
            logger.warning(f"Ignoring {kind.value}={value} confirm: a refresh is still pending")
            return False

        previous = self.selectors.get(kind)
        self.selectors.set(kind, value)
        try:
            self.refresher.refresh()
        except NetworkFailure:
            self.selectors.set(kind, previous)
            raise
        return True
