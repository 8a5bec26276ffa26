"""Tests for the caller-owned recommendation set."""

from datetime import timedelta

from smartfarm.enums import RecommendationPriority as P
from smartfarm.services import RecommendationSet, sort_by_priority


def test_empty_set():
    store = RecommendationSet()
    assert store.all == []
    assert store.count == 0
    assert store.critical_count == 0
    assert store.has_recommendations is False
    assert store.last_update is None


def test_views(make_recommendation, now):
    store = RecommendationSet()
    store.replace(
        [
            make_recommendation("a", P.CRITICAL),
            make_recommendation("b", P.HIGH),
            make_recommendation("c", P.CRITICAL),
            make_recommendation("d", P.LOW),
        ],
        updated_at=now,
    )

    assert [r.id for r in store.critical] == ["a", "c"]
    assert [r.id for r in store.high_priority] == ["b"]
    assert store.count == 4
    assert store.critical_count == 2
    assert store.last_update == now
    assert len(store) == 4


def test_dismissed_and_executed_leave_active_views(make_recommendation):
    store = RecommendationSet()
    store.replace([make_recommendation("a", P.CRITICAL), make_recommendation("b", P.HIGH)])

    assert store.dismiss("a") is True
    assert store.mark_executed("b") is True

    assert store.active == []
    assert store.critical_count == 0
    assert store.get("a").dismissed is True
    assert store.get("b").executed is True
    assert len(store) == 2


def test_unknown_id(make_recommendation):
    store = RecommendationSet()
    store.replace([make_recommendation("a")])

    assert store.get("zzz") is None
    assert store.dismiss("zzz") is False
    assert store.mark_executed("zzz") is False
    assert store.count == 1


def test_replace_drops_previous(make_recommendation):
    store = RecommendationSet()
    store.replace([make_recommendation("a")])
    store.dismiss("a")
    store.replace([make_recommendation("b")])

    assert [r.id for r in store.all] == ["b"]
    assert store.get("a") is None


def test_clear(make_recommendation):
    store = RecommendationSet()
    store.replace([make_recommendation("a")])
    store.clear()
    assert store.all == []


def test_expired(make_recommendation, now):
    store = RecommendationSet()
    store.replace([make_recommendation("a"), make_recommendation("b")])
    store.dismiss("b")

    assert store.expired(now) == []
    assert [r.id for r in store.expired(now + timedelta(hours=4))] == ["a"]


def test_sort_by_priority_is_stable(make_recommendation):
    recs = [
        make_recommendation("low-1", P.LOW),
        make_recommendation("crit-1", P.CRITICAL),
        make_recommendation("med-1", P.MEDIUM),
        make_recommendation("crit-2", P.CRITICAL),
        make_recommendation("high-1", P.HIGH),
        make_recommendation("low-2", P.LOW),
    ]
    assert [r.id for r in sort_by_priority(recs)] == ["crit-1", "crit-2", "high-1", "med-1", "low-1", "low-2"]
