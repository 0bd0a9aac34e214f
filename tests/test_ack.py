import threading

from conftest import wait_for
from udpmultisender.network.ack import AckTracker


def test_reset_tracks_every_port_unacknowledged():
    tracker = AckTracker()
    tracker.reset([7777, 7778, 7777])
    assert tracker.snapshot() == {7777: False, 7778: False}


def test_mark_only_affects_tracked_ports():
    tracker = AckTracker()
    tracker.reset([10, 11])
    assert tracker.mark(10) is True
    assert tracker.mark(12) is False
    assert tracker.snapshot() == {10: True, 11: False}


def test_reset_drops_old_ports():
    tracker = AckTracker()
    tracker.reset([1, 2])
    tracker.mark(1)
    tracker.reset([2, 3])
    assert tracker.snapshot() == {2: False, 3: False}


def test_collect_reports_then_resets():
    tracker = AckTracker()
    tracker.reset([1, 2, 3])
    tracker.mark(2)
    report = tracker.collect()
    assert report.received == [2]
    assert report.missing == [1, 3]
    assert not report.all_received
    assert tracker.snapshot() == {1: False, 2: False, 3: False}


def test_check_now_without_ports_reports_nothing():
    reports = []
    tracker = AckTracker(on_report=reports.append)
    assert tracker.check_now() is None
    assert reports == []


def test_scheduled_check_fires_once():
    reports = []
    tracker = AckTracker(on_report=reports.append)
    tracker.reset([5])
    tracker.mark(5)
    tracker.schedule_check(20)
    assert wait_for(lambda: len(reports) == 1)
    assert reports[0].received == [5]
    assert reports[0].all_received


def test_clear_cancels_pending_checks():
    reports = []
    tracker = AckTracker(on_report=reports.append)
    tracker.reset([5])
    timer = tracker.schedule_check(200)
    tracker.clear()
    timer.join(1.0)
    assert reports == []
    assert tracker.snapshot() == {}


def test_concurrent_marks_and_collects_do_not_lose_state():
    tracker = AckTracker()
    ports = list(range(1000, 1100))
    tracker.reset(ports)

    def marker():
        for port in ports:
            tracker.mark(port)

    threads = [threading.Thread(target=marker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    report = tracker.collect()
    assert sorted(report.received) == ports
    assert report.missing == []
