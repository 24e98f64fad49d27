from pathlib import Path

import pytest

from sysmon.models.snapshot import SystemSnapshot
from sysmon.services.report import (
    format_bytes,
    format_duration,
    format_percent,
    render_report,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0.0 B"),
        (512, "512.0 B"),
        (2048, "2.0 KB"),
        (512 * 1024**2, "512.0 MB"),
        (int(2.1 * 1024**3), "2.1 GB"),
        (3 * 1024**5, "3.0 PB"),
    ],
)
def test_format_bytes(value, expected):
    assert format_bytes(value) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (59, "59s"),
        (3661, "1h 1m 1s"),
        (3 * 86400 + 4 * 3600, "3d 4h"),
        (86400 + 5, "1d 5s"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_percent_uses_two_decimals():
    assert format_percent(12.5) == "12.50%"
    assert format_percent(0) == "0.00%"


def test_render_report_groups_lines():
    snapshot = SystemSnapshot(
        hostname="host1",
        uptime_seconds=3661,
        current_user="alice",
        cpu_usage_percent=12.5,
        memory_usage_ratio=0.5,
        total_memory_bytes=1024**3,
        disk_usage_ratio=0.1,
        total_disk_bytes=100 * 1024**3,
        home_directory=Path("/home/alice"),
        os_name="Debian GNU/Linux",
        kernel_version="6.1.0",
        architecture_descriptor="x86_64",
        physical_core_count=4,
        process_count=200,
    )

    lines = render_report(snapshot)

    assert lines == [
        "Hostname: host1",
        "Uptime: 1h 1m 1s",
        "",
        "Current User: alice",
        "CPU Usage: 12.50%",
        "Memory Usage: 50.00%",
        "Total Memory: 1.0 GB",
        "Disk Usage: 10.00%",
        "Total Disk Space: 100.0 GB",
        f"Home Directory: {Path('/home/alice')}",
        "",
        "Operating System: Debian GNU/Linux",
        "Kernel: 6.1.0",
        "Architecture: x86_64",
        "CPU Cores: 4",
        "Processes: 200",
        "",
    ]
