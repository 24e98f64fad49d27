from pathlib import Path

from sysmon import main as cli
from sysmon.models.errors import IOFailure
from sysmon.models.snapshot import SystemSnapshot
from sysmon.services import snapshot_collector


def _snapshot():
    return SystemSnapshot(
        hostname="host1",
        uptime_seconds=3661,
        current_user="alice",
        cpu_usage_percent=12.5,
        memory_usage_ratio=0.5,
        total_memory_bytes=1024**3,
        disk_usage_ratio=0.1,
        total_disk_bytes=100 * 1024**3,
        home_directory=Path("/home/alice"),
        os_name="Linux",
        kernel_version="6.1.0",
        architecture_descriptor="x86_64",
        physical_core_count=4,
        process_count=200,
    )


def test_main_prints_report_and_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr(snapshot_collector, "collect_snapshot", _snapshot)

    assert cli.main() == 0

    out, err = capsys.readouterr()
    assert "Hostname: host1" in out
    assert "Uptime: 1h 1m 1s" in out
    assert "Memory Usage: 50.00%" in out
    assert "An error occurred" not in err


def test_main_reports_collector_error_on_stderr(monkeypatch, capsys):
    """
    A classified collector failure is printed as a single diagnostic line on
    stderr and turned into a non-zero exit status; nothing goes to stdout.
    """

    def fake_collect_snapshot():
        raise IOFailure("environment variable USER is not set")

    monkeypatch.setattr(snapshot_collector, "collect_snapshot", fake_collect_snapshot)

    assert cli.main() != 0

    out, err = capsys.readouterr()
    assert out == ""
    assert "An error occurred: IO error: environment variable USER is not set" in err
