"""Tests for PaginatedListStore."""

import pytest


def ids(state):
    return [record.id for record in state.records]


def test_store_initial_state(store):
    from pagedlist.domain import ListPhase

    state = store.state

    assert state.phase is ListPhase.IDLE
    assert state.records == ()
    assert state.seen_ids == frozenset()
    assert state.cursor is None
    assert state.last_error is None
    assert state.loading is False


def test_initial_load_requests_first_page(store, fetcher, runner):
    from pagedlist.domain import ListPhase

    assert store.initial_load() is True

    assert store.phase is ListPhase.LOADING
    assert store.state.loading is True
    assert fetcher.requested_cursors == [None]
    assert runner.in_flight == 1


def test_example_scenario_merges_overlapping_pages(store, fetcher, runner):
    from pagedlist.domain import ListPhase, MergeResult

    fetcher.queue_page([(1, "A"), (2, "B")], next_cursor="c1")
    fetcher.queue_page([(2, "B"), (3, "C")], next_cursor=None)

    store.initial_load()
    runner.complete_next()

    assert store.phase is ListPhase.SETTLED
    assert [r.display_name for r in store.state.records] == ["A", "B"]
    assert store.state.cursor == "c1"

    assert store.load_more() is True
    assert fetcher.requested_cursors == [None, "c1"]
    runner.complete_next()

    state = store.state
    assert state.phase is ListPhase.SETTLED
    assert [r.display_name for r in state.records] == ["A", "B", "C"]
    assert state.cursor is None
    assert state.last_merge == MergeResult(appended=1, discarded=1)

    assert store.load_more() is False
    assert runner.submitted == 2


def test_load_more_while_loading_is_noop(store, fetcher, runner):
    fetcher.queue_page([(1, "A")], next_cursor="c1")
    fetcher.queue_page([(2, "B")], next_cursor="c2")
    store.initial_load()
    runner.complete_next()

    store.load_more()
    before = store.state

    assert store.load_more() is False
    assert store.initial_load() is False
    assert store.state == before
    assert runner.in_flight == 1
    assert fetcher.requested_cursors == [None, "c1"]


def test_load_more_rejected_before_initial_load(store, runner):
    from pagedlist.domain import ListPhase

    assert store.load_more() is False
    assert runner.submitted == 0
    assert store.phase is ListPhase.IDLE


def test_initial_load_only_from_idle(store, fetcher, runner):
    fetcher.queue_page([(1, "A")], next_cursor="c1")
    store.initial_load()
    runner.complete_next()

    assert store.initial_load() is False
    assert runner.submitted == 1


def test_dedup_keeps_seen_ids_in_sync(store, fetcher, runner):
    from pagedlist.domain import MergeResult

    pages = [
        ([(1, "A"), (2, "B"), (2, "B")], "c1"),
        ([(2, "B"), (3, "C"), (1, "A")], "c2"),
        ([(4, "D"), (3, "C"), (5, "E")], "c3"),
        ([(5, "E")], None),
    ]
    for records, cursor in pages:
        fetcher.queue_page(records, next_cursor=cursor)

    store.initial_load()
    runner.complete_next()
    while store.load_more():
        runner.complete_next()

    state = store.state
    assert ids(state) == [1, 2, 3, 4, 5]
    assert state.seen_ids == frozenset(ids(state))
    assert state.last_merge == MergeResult(appended=0, discarded=1)


def test_merge_reports_appended_and_discarded(store):
    from pagedlist.domain import MergeResult, Record

    first = store.merge([Record(1, "A"), Record(2, "B")])
    second = store.merge([Record(2, "B"), Record(3, "C"), Record(3, "C")])

    assert first == MergeResult(appended=2, discarded=0)
    assert second == MergeResult(appended=1, discarded=2)
    assert ids(store.state) == [1, 2, 3]


def test_merge_preserves_page_order(store):
    from pagedlist.domain import Record

    store.merge([Record(9, "I"), Record(3, "C")])
    store.merge([Record(1, "A")])

    assert ids(store.state) == [9, 3, 1]


def test_failure_enters_error_and_starts_retry_countdown(store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    fetcher.queue_error("timeout")

    store.initial_load()
    runner.complete_next()

    state = store.state
    assert state.phase is ListPhase.ERROR
    assert state.last_error.description == "timeout"
    assert state.retry_countdown.remaining_seconds == 5
    assert state.retry_countdown.active is True
    assert state.retry_countdown.enabled is False
    assert scheduler.active_sources == 1


def test_retry_is_gated_by_countdown(store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    fetcher.queue_error("timeout")
    fetcher.queue_page([(1, "A")])
    store.initial_load()
    runner.complete_next()

    assert store.retry() is False
    assert runner.submitted == 1

    scheduler.tick(4)
    assert store.state.retry_countdown.remaining_seconds == 1
    assert store.retry() is False

    scheduler.tick()
    assert store.state.retry_countdown.enabled is True
    assert scheduler.active_sources == 0

    assert store.retry() is True
    assert fetcher.requested_cursors == [None, None]
    assert store.phase is ListPhase.LOADING

    runner.complete_next()
    assert store.phase is ListPhase.SETTLED
    assert store.state.last_error is None
    assert store.state.retry_countdown is None


def test_failed_load_more_keeps_cursor_and_records(store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    fetcher.queue_page([(1, "A"), (2, "B")], next_cursor="c1")
    fetcher.queue_error("Internal Server Error")
    fetcher.queue_page([(3, "C")], next_cursor=None)

    store.initial_load()
    runner.complete_next()
    store.load_more()
    runner.complete_next()

    state = store.state
    assert state.phase is ListPhase.ERROR
    assert state.cursor == "c1"
    assert ids(state) == [1, 2]

    scheduler.tick(5)
    store.retry()
    assert fetcher.requested_cursors == [None, "c1", "c1"]

    runner.complete_next()
    assert ids(store.state) == [1, 2, 3]
    assert store.state.cursor is None


def test_consecutive_failures_restart_fixed_countdown(store, fetcher, runner, scheduler):
    fetcher.queue_error("first")
    fetcher.queue_error("second")

    store.initial_load()
    runner.complete_next()
    scheduler.tick(5)
    store.retry()
    runner.complete_next()

    state = store.state
    assert state.last_error.description == "second"
    assert state.retry_countdown.remaining_seconds == 5
    assert scheduler.active_sources == 1


def test_backoff_factor_grows_retry_delay(make_store, fetcher, runner, scheduler):
    store = make_store(backoff_factor=2.0, max_retry_delay_seconds=15)
    for _ in range(3):
        fetcher.queue_error("down")
    fetcher.queue_page([(1, "A")])
    fetcher.queue_error("down again")

    delays = []
    store.initial_load()
    for _ in range(3):
        runner.complete_next()
        delays.append(store.state.retry_countdown.remaining_seconds)
        scheduler.tick(delays[-1])
        store.retry()

    assert delays == [5, 10, 15]

    runner.complete_next()
    store.reset()
    runner.complete_next()
    assert store.state.retry_countdown.remaining_seconds == 5


def test_empty_first_page_enters_empty_state(store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    fetcher.queue_page([], next_cursor=None)

    store.initial_load()
    runner.complete_next()

    state = store.state
    assert state.phase is ListPhase.EMPTY
    assert state.refresh_countdown.remaining_seconds == 3
    assert state.retry_countdown is None
    assert scheduler.active_sources == 1


def test_manual_refresh_is_gated_by_empty_countdown(store, fetcher, runner, scheduler):
    fetcher.queue_page([], next_cursor=None)
    fetcher.queue_page([(1, "A")])
    store.initial_load()
    runner.complete_next()

    assert store.manual_refresh() is False
    scheduler.tick(2)
    assert store.manual_refresh() is False

    scheduler.tick()
    assert store.manual_refresh() is True
    assert fetcher.requested_cursors == [None, None]

    runner.complete_next()
    assert ids(store.state) == [1]


def test_manual_refresh_rejected_outside_empty_state(store, fetcher, runner):
    fetcher.queue_page([(1, "A")])
    store.initial_load()
    runner.complete_next()

    assert store.manual_refresh() is False
    assert runner.submitted == 1


def test_empty_page_with_cursor_settles(store, fetcher, runner):
    from pagedlist.domain import ListPhase

    fetcher.queue_page([], next_cursor="c1")

    store.initial_load()
    runner.complete_next()

    assert store.phase is ListPhase.SETTLED
    assert store.state.records == ()
    assert store.load_more() is True


def test_error_and_empty_countdowns_are_independent(make_store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    store = make_store(retry_delay_seconds=5, refresh_delay_seconds=3)
    fetcher.queue_error("boom")
    fetcher.queue_page([])

    store.initial_load()
    runner.complete_next()
    scheduler.tick(5)
    store.retry()
    runner.complete_next()

    state = store.state
    assert state.phase is ListPhase.EMPTY
    assert state.retry_countdown is None
    assert state.refresh_countdown.remaining_seconds == 3
    assert scheduler.active_sources == 1


def test_reset_clears_and_reloads(store, fetcher, runner):
    from pagedlist.domain import ListPhase

    fetcher.queue_page([(1, "A")], next_cursor="c1")
    fetcher.queue_page([(7, "G")])
    store.initial_load()
    runner.complete_next()

    assert store.reset() is True

    state = store.state
    assert state.phase is ListPhase.LOADING
    assert state.records == ()
    assert state.seen_ids == frozenset()
    assert state.cursor is None
    assert fetcher.requested_cursors == [None, None]

    runner.complete_next()
    assert ids(store.state) == [7]


def test_reset_cancels_running_countdown(store, fetcher, runner, scheduler):
    fetcher.queue_error("boom")
    store.initial_load()
    runner.complete_next()
    assert scheduler.active_sources == 1

    store.reset()

    assert scheduler.active_sources == 0
    assert store.state.retry_countdown is None
    assert store.state.last_error is None


def test_reset_while_loading_ignores_stale_result(store, fetcher, runner):
    from pagedlist.domain import ListPhase

    fetcher.queue_page([(1, "stale")], next_cursor="old")
    fetcher.queue_page([(2, "fresh")], next_cursor=None)

    store.initial_load()
    store.reset()
    assert runner.in_flight == 2

    runner.complete_next()
    assert store.phase is ListPhase.LOADING
    assert store.state.records == ()

    runner.complete_next()
    assert store.phase is ListPhase.SETTLED
    assert ids(store.state) == [2]
    assert store.state.cursor is None


def test_stale_failure_is_ignored(store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    fetcher.queue_error("stale failure")
    fetcher.queue_page([(1, "A")])

    store.initial_load()
    store.reset()
    runner.complete_next()

    assert store.phase is ListPhase.LOADING
    assert scheduler.active_sources == 0

    runner.complete_next()
    assert store.phase is ListPhase.SETTLED


def test_completion_without_page_or_error_fails_loudly(store, runner):
    from pagedlist.domain import ContractViolationError

    store.initial_load()
    _, on_done = runner.pending.pop(0)

    with pytest.raises(ContractViolationError):
        on_done(None, None)


def test_should_load_more_only_for_last_row(store, fetcher, runner):
    fetcher.queue_page([(1, "A"), (2, "B"), (3, "C")], next_cursor="c1")
    store.initial_load()
    runner.complete_next()

    assert store.should_load_more(1) is False
    assert store.should_load_more(2) is True

    store.load_more()
    assert store.should_load_more(2) is False


def test_observers_receive_snapshots(store, fetcher, runner, scheduler):
    from pagedlist.domain import ListPhase

    snapshots = []
    store.add_observer(snapshots.append)
    fetcher.queue_error("boom")

    store.initial_load()
    runner.complete_next()
    scheduler.tick()

    phases = [snapshot.phase for snapshot in snapshots]
    assert phases[0] is ListPhase.LOADING
    assert ListPhase.ERROR in phases
    assert snapshots[-1].retry_countdown.remaining_seconds == 4

    store.remove_observer(snapshots.append)
    count = len(snapshots)
    scheduler.tick()
    assert len(snapshots) == count


def test_zero_retry_delay_enables_retry_immediately(make_store, fetcher, runner, scheduler):
    store = make_store(retry_delay_seconds=0)
    fetcher.queue_error("boom")
    fetcher.queue_page([(1, "A")])

    store.initial_load()
    runner.complete_next()

    assert store.state.retry_countdown.enabled is True
    assert scheduler.active_sources == 0
    assert store.retry() is True
