import json

import pytest

from totalfw.framework import Definitions, Framework, Parsers, Validators, initialize_framework
from totalfw.paths import TPath
from totalfw.types import AuditData


@pytest.fixture
def framework(tmp_path):
    return Framework(path=TPath(tmp_path))


@pytest.fixture
def defs(framework):
    return Definitions(framework)


def test_framework_defaults(monkeypatch):
    monkeypatch.delenv("NODE_VERSION", raising=False)
    fw = initialize_framework()
    assert fw.is5 == 5012
    assert fw.version == 5012
    assert fw.version_header == "5"
    assert fw.version_node == "unknown"
    assert fw.is_loaded is False
    assert fw.errors == []
    assert fw.path.root() == TPath("src").root()


def test_framework_reads_node_version(monkeypatch):
    monkeypatch.setenv("NODE_VERSION", "v20")
    assert Framework().version_node == "v20"


def test_json_parser_round_trip():
    data = {"a": [1, 2], "b": "x"}
    assert Parsers().json(json.dumps(data)) == data


def test_json_parser_rejects_bad_input():
    with pytest.raises(json.JSONDecodeError):
        Parsers().json("{not json")


def test_urlencoded_parser():
    parsed = Parsers().urlencoded("a=1&b=2&c")
    assert parsed == {"a": "1", "b": "2"}
    assert Parsers().urlencoded("k=v=w") == {"k": "v=w"}


def test_xml_parser_returns_input():
    assert Parsers().xml("<a/>") == "<a/>"


def test_validators():
    v = Validators()
    assert v.email.search("user@example.com")
    assert not v.email.search("nope")
    assert v.url.search("https://example.com/path")
    assert not v.url.search("ftp://example.com")
    assert v.xss.search("hello <b>")
    assert v.sqlinjection.search("SELECT name")
    assert not v.sqlinjection.search("selection")


def test_on_success(defs):
    result = defs.on_success([1, 2])
    assert result.success is True
    assert result.value == [1, 2]


def test_on_view_compile_passes_html(defs):
    assert defs.on_view_compile("index", "<p>x</p>") == "<p>x</p>"


def test_on_audit_appends_json_line(framework, defs):
    framework.path.logs().mkdir(parents=True)
    defs.on_audit(None, AuditData(data={"user": "someone"}))
    defs.on_audit(None, AuditData(data={"user": "other"}))
    lines = framework.path.logs("audit.log").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert [r["user"] for r in records] == ["someone", "other"]
    assert all("dtcreated" in r for r in records)
    assert framework.stats.performance.open == 2


def test_on_audit_ignores_missing_directory(framework, defs):
    defs.on_audit("custom", AuditData())
    assert not framework.path.logs("custom.log").exists()
    assert framework.stats.performance.open == 1


def test_on_mail_splits_addresses_and_uses_smtp_user(framework, defs):
    framework.config.smtp.user = "sender@example.com"
    msg = defs.on_mail("a@example.com, ,b@example.com", "Hi", "Body")
    assert msg.to_addresses == ["a@example.com", "b@example.com"]
    assert msg.from_address == "sender@example.com"
    assert msg.from_name == ""
    assert msg.reply_to is None
    assert msg.sending is not None and msg.subject == "Hi"


def test_on_mail_uses_config_reply_cc_bcc(framework, defs):
    framework.config.mail_from = "from@example.com"
    framework.config.mail_reply = "reply@example.com"
    framework.config.mail_cc = "cc@example.com"
    framework.config.mail_bcc = "x"
    msg = defs.on_mail("to@example.com", "S", "B")
    assert msg.to_addresses == ["to@example.com"]
    assert msg.from_address == "from@example.com"
    assert msg.reply_to == "reply@example.com"
    assert msg.cc == ["cc@example.com"]
    assert msg.bcc == []


def test_on_mail_explicit_reply_wins(framework, defs):
    framework.config.mail_reply = "reply@example.com"
    msg = defs.on_mail("to@example.com", "S", "B", None, "other@example.com")
    assert msg.reply_to == "other@example.com"


def test_on_error_records_and_prints(framework, defs, capsys):
    defs.on_error(ValueError("boom"), "worker", "/api/x")
    out = capsys.readouterr().out
    assert "ERROR =======" in out
    assert "worker ---> boom (/api/x)" in out
    assert framework.errors[0].error == "boom"
    assert framework.errors[0].name == "worker"
    assert framework.stats.error == 1


def test_on_error_keeps_last_ten(framework, defs, capsys):
    for i in range(15):
        defs.on_error(RuntimeError(str(i)))
    capsys.readouterr()
    assert len(framework.errors) == 10
    assert framework.errors[0].error == "5"
    assert framework.errors[-1].name == "unknown"
    assert framework.stats.error == 15