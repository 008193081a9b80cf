import pytest

from apps.page_client.dialogs import DialogState
from apps.page_client.state import SelectorStore
from apps.results_page.selectors import SelectorKind, SelectorPair
from apps.utils.errors import DialogStateError, LookupFailure, NetworkFailure

EVENT = SelectorKind.EVENT
USER = SelectorKind.USER


@pytest.fixture
def seeded_page(page):
    page.state.selectors = SelectorStore(SelectorPair.of('5', '0'))
    page.state.show_selectors()
    return page


def test_dialog_walks_through_the_full_flow(seeded_page, transitions):
    dialog = seeded_page.dialog('user')

    dialog.open()
    dialog.search('田中')
    dialog.select('301')
    assert dialog.confirm() is True

    assert [(old, new) for kind, old, new in transitions] == [
        (DialogState.CLOSED, DialogState.OPEN),
        (DialogState.OPEN, DialogState.SEARCHING),
        (DialogState.SEARCHING, DialogState.RESULTS_SHOWN),
        (DialogState.RESULTS_SHOWN, DialogState.SELECTED),
        (DialogState.SELECTED, DialogState.CLOSED),
    ]
    assert seeded_page.selectors.get(USER) == '301'
    assert seeded_page.active_dialog is None


def test_open_resets_previous_session(page):
    dialog = page.dialog('user')
    dialog.open()
    dialog.search('田中')
    dialog.select('101')

    dialog.open()

    assert dialog.state is DialogState.OPEN
    assert dialog.session.query == '0'
    assert dialog.session.candidates == []
    assert dialog.session.selected_id is None


def test_open_starts_query_at_current_selector_value(seeded_page):
    seeded_page.dialog('event').open()

    assert seeded_page.dialog('event').session.query == '5'


def test_opening_event_dialog_closes_user_dialog_first(page, transitions):
    page.dialog('user').open()
    transitions.clear()

    page.dialog('event').open()

    assert transitions == [
        (USER, DialogState.OPEN, DialogState.CLOSED),
        (EVENT, DialogState.CLOSED, DialogState.OPEN),
    ]
    assert page.dialog('user').state is DialogState.CLOSED
    assert page.active_dialog is page.dialog('event')


@pytest.mark.parametrize('script', [
    ['open user', 'open event', 'open user', 'close user', 'open event'],
    ['open event', 'search event', 'open user', 'search user', 'open event', 'close event'],
    ['open user', 'search user', 'select user', 'open event', 'open event'],
])
def test_at_most_one_dialog_is_visible(page, script):
    for step in script:
        action, kind = step.split()
        dialog = page.dialog(kind)
        if action == 'search':
            dialog.search('')
        elif action == 'select':
            dialog.select(dialog.session.candidates[0].id)
        else:
            getattr(dialog, action)()

        visible = page.visible_dialogs()
        assert len(visible) <= 1
        if visible:
            assert page.active_dialog is visible[0]


def test_empty_result_is_still_results_shown(page):
    dialog = page.dialog('user')
    dialog.open()

    assert dialog.search('該当なし') is True

    assert dialog.state is DialogState.RESULTS_SHOWN
    assert dialog.session.candidates == []


def test_search_uses_the_dialog_kind(page, fake_transport):
    page.dialog('event').open()
    page.dialog('event').search('ライブ')

    assert fake_transport.lookup_calls == [(EVENT, 'ライブ')]
    assert [c.id for c in page.dialog('event').session.candidates] == ['5']


def test_reselecting_overwrites_choice(page):
    dialog = page.dialog('user')
    dialog.open()
    dialog.search('')
    dialog.select('101')
    dialog.select('102')

    assert dialog.session.selected_id == '102'
    assert dialog.state is DialogState.SELECTED


def test_selecting_unknown_candidate_is_rejected(page):
    dialog = page.dialog('user')
    dialog.open()
    dialog.search('田中')

    with pytest.raises(DialogStateError):
        dialog.select('102')


def test_confirm_without_selection_is_rejected(page):
    dialog = page.dialog('user')
    dialog.open()
    dialog.search('田中')

    with pytest.raises(DialogStateError):
        dialog.confirm()


def test_search_on_closed_dialog_is_rejected(page):
    with pytest.raises(DialogStateError):
        page.dialog('event').search('x')


@pytest.mark.parametrize('progress', ['open', 'searched', 'selected'])
def test_closing_without_confirm_never_touches_store(seeded_page, fake_transport, progress):
    before = seeded_page.selectors.pair()
    dialog = seeded_page.dialog('user')
    dialog.open()
    if progress in ('searched', 'selected'):
        dialog.search('田中')
    if progress == 'selected':
        dialog.select('101')

    dialog.close()
    dialog.close()

    assert seeded_page.selectors.pair() == before
    assert fake_transport.fragment_calls == []
    assert dialog.state is DialogState.CLOSED


def test_lookup_failure_leaves_dialog_open_with_error(page, fake_transport):
    fake_transport.lookup_error = LookupFailure("user search answered 502")
    dialog = page.dialog('user')
    dialog.open()

    assert dialog.search('田中') is False

    assert dialog.state is DialogState.OPEN
    assert dialog.session.candidates == []
    assert '502' in dialog.session.error

    fake_transport.lookup_error = None
    assert dialog.search('田中') is True
    assert dialog.session.error is None


def test_network_failure_during_lookup_is_reported_like_lookup_failure(page, fake_transport):
    fake_transport.lookup_error = NetworkFailure("timed out")
    dialog = page.dialog('event')
    dialog.open()

    dialog.search('')

    assert dialog.state is DialogState.OPEN
    assert dialog.session.error == 'timed out'


def test_response_arriving_after_close_is_discarded(page, fake_transport):
    dialog = page.dialog('user')
    dialog.open()
    fake_transport.on_lookup = dialog.close

    assert dialog.search('田中') is False

    assert dialog.state is DialogState.CLOSED
    assert dialog.session.candidates == []


def test_response_arriving_after_reopen_is_discarded(page, fake_transport):
    dialog = page.dialog('user')
    dialog.open()
    fake_transport.on_lookup = dialog.open

    assert dialog.search('田中') is False

    assert dialog.state is DialogState.OPEN
    assert dialog.session.candidates == []
    assert dialog.session.query == '0'


def test_refresh_finishing_after_reopen_leaves_new_session_open(page, fake_transport):
    user = page.dialog('user')
    user.open()
    user.search('田中')
    user.select('101')
    fake_transport.on_fragment = lambda: (user.close(), user.open())

    assert user.confirm() is True

    assert user.state is DialogState.OPEN
    assert page.active_dialog is user
    assert page.selectors.get(USER) == '101'


def test_refresh_failing_after_reopen_does_not_mark_new_session(page, fake_transport):
    user = page.dialog('user')
    user.open()
    user.search('田中')
    user.select('101')
    fake_transport.on_fragment = lambda: (user.close(), user.open())
    fake_transport.fragment_error = NetworkFailure("timed out")

    assert user.confirm() is False

    assert user.state is DialogState.OPEN
    assert user.session.error is None
    assert page.selectors.get(USER) == '0'


def test_failure_arriving_after_switching_dialogs_is_discarded(page, fake_transport):
    user = page.dialog('user')
    user.open()
    fake_transport.on_lookup = page.dialog('event').open
    fake_transport.lookup_error = LookupFailure("late")

    user.search('田中')

    assert user.state is DialogState.CLOSED
    assert user.session.error is None
    assert page.dialog('event').state is DialogState.OPEN
