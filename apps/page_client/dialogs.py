# apps/page_client/dialogs.py

import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from apps.results_page.selectors import Candidate, SelectorKind
from apps.utils.errors import DialogStateError, LookupFailure, NetworkFailure

logger = logging.getLogger(__name__)

_session_tokens = itertools.count(1)


class DialogState(Enum):
    CLOSED = 'closed'
    OPEN = 'open'
    SEARCHING = 'searching'
    RESULTS_SHOWN = 'results_shown'
    SELECTED = 'selected'


SEARCHABLE_STATES = {DialogState.OPEN, DialogState.RESULTS_SHOWN, DialogState.SELECTED}
SELECTABLE_STATES = {DialogState.RESULTS_SHOWN, DialogState.SELECTED}


@dataclass
class DialogSession:
    kind: SelectorKind
    query: str = ''
    candidates: List[Candidate] = field(default_factory=list)
    selected_id: Optional[str] = None
    state: DialogState = DialogState.CLOSED
    error: Optional[str] = None
    token: int = field(default_factory=lambda: next(_session_tokens))

    @property
    def visible(self):
        return self.state is not DialogState.CLOSED


class SelectorDialog:
    """
    One search-and-select popup for a single selector kind.

    The page owns the active-dialog slot and the selector store; the dialog
    only reaches them through the page.
    """

    def __init__(self, kind, page):
        self.kind = kind
        self.page = page
        self.session = DialogSession(kind)

    @property
    def state(self):
        return self.session.state

    @property
    def visible(self):
        return self.session.visible

    def _move(self, new_state):
        old_state = self.session.state
        self.session.state = new_state
        self.page.notify_transition(self.kind, old_state, new_state)

    def _reset(self):
        self.session = DialogSession(self.kind, state=self.session.state)

    # --- Transitions ---

    def open(self):
        """
        Closed -> Open. Any other open dialog is closed first and the query
        starts out as the current selector value.
        """
        self.page.activate(self)
        self._reset()
        self.session.query = self.page.selectors.get(self.kind)
        self._move(DialogState.OPEN)

    def close(self):
        """Any state -> Closed. Never touches the selector store."""
        if not self.visible:
            return
        self._move(DialogState.CLOSED)
        self._reset()
        self.page.release(self)

    def search(self, query):
        """
        Looks up candidates for this dialog's kind.

        A failed lookup leaves the dialog open with an empty list and an
        error message. A response arriving after the dialog was closed or
        reopened is dropped.
        """
        if self.session.state not in SEARCHABLE_STATES:
            raise DialogStateError(f"cannot search while {self.kind.value} dialog is {self.session.state.value}")

        token = self.session.token
        self.session.query = query
        self.session.error = None
        self._move(DialogState.SEARCHING)

        try:
            candidates = self.page.transport.lookup(self.kind, query)
        except (LookupFailure, NetworkFailure) as e:
            if not self._is_current(token):
                return False
            logger.warning(f"{self.kind.value} lookup for {query!r} failed: {e}")
            self.session.candidates = []
            self.session.selected_id = None
            self.session.error = str(e)
            self._move(DialogState.OPEN)
            return False

        if not self._is_current(token):
            logger.info(f"Discarding stale {self.kind.value} lookup for {query!r}")
            return False

        self.session.candidates = list(candidates)
        self.session.selected_id = None
        self._move(DialogState.RESULTS_SHOWN)
        return True

    def select(self, candidate_id):
        """ResultsShown/Selected -> Selected. Picking again overwrites the choice."""
        if self.session.state not in SELECTABLE_STATES:
            raise DialogStateError(f"nothing to select while {self.kind.value} dialog is {self.session.state.value}")
        if candidate_id not in {c.id for c in self.session.candidates}:
            raise DialogStateError(f"{candidate_id!r} is not one of the listed {self.kind.value} candidates")

        self.session.selected_id = candidate_id
        if self.session.state is not DialogState.SELECTED:
            self._move(DialogState.SELECTED)

    def confirm(self):
        """
        Selected -> Closed, writing the choice and refreshing the results.

        Returns False when the confirm was ignored because a refresh is still
        pending, or when the refresh failed; the selection is kept either way.
        """
        if self.session.state is not DialogState.SELECTED:
            raise DialogStateError(f"nothing selected in {self.kind.value} dialog")

        token = self.session.token
        try:
            refreshed = self.page.update_selector_and_refresh(self.kind, self.session.selected_id)
        except NetworkFailure as e:
            if self._is_current(token):
                self.session.error = str(e)
            return False

        # The user may have closed or reopened this dialog while the refresh ran
        if refreshed and self._is_current(token):
            self.close()
        return refreshed

    def _is_current(self, token):
        return self.visible and self.session.token == token
