from dataclasses import fields
from datetime import datetime, timezone

from totalfw.types import (
    AuditData,
    ClusterStats,
    Controller,
    ErrorInfo,
    InternalStats,
    Message,
    PendingItem,
    PerformanceStats,
    RequestStats,
    ResponseStats,
    Routes,
    SMTPConfig,
    Stats,
    SuccessResult,
    Temporary,
)


def test_cluster_stats_type():
    assert ClusterStats().type == "stats"


def test_counter_defaults_are_zero():
    for cls in (PerformanceStats, RequestStats, ResponseStats):
        obj = cls()
        assert all(getattr(obj, f.name) == 0 for f in fields(obj))


def test_internal_stats_defaults():
    stats = InternalStats()
    assert (stats.ticks, stats.counter, stats.uid, stats.interval) == (0, 0, 0, None)


def test_stats_nested_are_independent():
    a, b = Stats(), Stats()
    a.performance.open += 1
    a.error += 1
    assert b.performance.open == 0
    assert b.error == 0
    assert a.performance.open == 1


def test_temporary_collections_not_shared():
    a, b = Temporary(), Temporary()
    a.cache["key"] = 1
    a.pending.append("x")
    assert b.cache == {}
    assert b.pending == []
    assert b.service.request == 0


def test_routes_defaults():
    routes = Routes()
    assert routes.timeout is None
    assert routes.routes == [] and routes.proxies == []
    assert routes.virtual_routes == {}


def test_audit_to_dict_round_trip():
    when = datetime(2023, 5, 1, 12, 0, tzinfo=timezone.utc)
    audit = AuditData(dtcreated=when, data={"user": "joe"})
    result = audit.to_dict()
    assert result["user"] == "joe"
    assert datetime.fromisoformat(result["dtcreated"]) == when


def test_audit_default_time_is_utc():
    audit = AuditData()
    assert audit.dtcreated.utcoffset().total_seconds() == 0


def test_error_info_to_dict():
    when = datetime(2023, 5, 1, tzinfo=timezone.utc)
    info = ErrorInfo(error="boom", name="worker", url="/api/", date=when)
    result = info.to_dict()
    assert result["error"] == "boom"
    assert result["name"] == "worker"
    assert result["url"] == "/api/"
    assert datetime.fromisoformat(result["date"]) == when


def test_success_result():
    result = SuccessResult([1, 2])
    assert result.success is True
    assert result.value == [1, 2]


def test_message_defaults():
    msg = Message(subject="Hi", body="Body")
    assert msg.to_addresses == [] and msg.cc == [] and msg.bcc == []
    assert msg.reply_to is None and msg.sending is None


def test_controller_and_smtp():
    ctrl = Controller(ip="127.0.0.1", headers={"user-agent": "agent"})
    assert ctrl.headers["user-agent"] == "agent"
    assert ctrl.query == {}
    smtp = SMTPConfig(user="user@example.com")
    assert smtp.user == "user@example.com"
    assert smtp.from_address is None


def test_pending_item_created_is_utc():
    item = PendingItem(id="a")
    assert item.created.tzinfo is not None
    assert item.id == "a"