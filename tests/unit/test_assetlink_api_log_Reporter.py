"""Unit tests for assetlink.api.log.Reporter module."""

from assetlink.api.log.logfile_sink import logfile_sink
from assetlink.api.log.Reporter import ReportedMessage, Reporter
from assetlink.api.log.Severity import Severity


def test_records_messages_in_order():
    reporter = Reporter()
    reporter.info("one")
    reporter.warning("two")
    reporter.error("three")
    reporter.custom("four")

    assert reporter.messages == [
        ReportedMessage(Severity.INFO, "one"),
        ReportedMessage(Severity.WARNING, "two"),
        ReportedMessage(Severity.ERROR, "three"),
        ReportedMessage(Severity.CUSTOM, "four"),
    ]
    assert reporter.errors == ["three"]
    assert reporter.warnings == ["two"]


def test_forwards_to_sinks():
    seen = []
    reporter = Reporter(sinks=[lambda severity, message: seen.append((severity, message))])
    reporter.warning("careful")
    assert seen == [(Severity.WARNING, "careful")]


def test_failing_sink_does_not_fail_caller():
    def broken_sink(severity, message):
        raise RuntimeError("sink down")

    seen = []
    reporter = Reporter(sinks=[broken_sink, lambda s, m: seen.append(m)])
    reporter.error("still recorded")

    assert reporter.errors == ["still recorded"]
    assert seen == ["still recorded"]


def test_since_returns_tail():
    reporter = Reporter()
    reporter.info("before")
    start = len(reporter.messages)
    reporter.custom("after")
    assert [m.message for m in reporter.since(start)] == ["after"]


def test_to_dicts():
    messages = [ReportedMessage(Severity.CUSTOM, "raw")]
    assert Reporter.to_dicts(messages) == [{"severity": "custom", "message": "raw"}]


def test_logfile_sink_writes_levels(tmp_path):
    log_path = tmp_path / "logs" / "logfile"
    reporter = Reporter(sinks=[logfile_sink(log_path)])
    reporter.warning("vendor/foo: asset directory does not exist 'dist'")
    reporter.custom("Installing asset vendor/foo/dist")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "[assets] WARN: vendor/foo: asset directory does not exist 'dist'" in lines[0]
    assert "[assets] INFO: Installing asset vendor/foo/dist" in lines[1]
