from typing import List

from sysmon.models.snapshot import SystemSnapshot

_BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")
_DURATION_UNITS = (("d", 86400), ("h", 3600), ("m", 60), ("s", 1))


def format_bytes(n: float) -> str:
    """Format a byte count with the largest fitting 1024-based unit."""
    for unit in _BYTE_UNITS:
        if abs(n) < 1024:
            return f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} PB"


def format_duration(seconds: int) -> str:
    """Format seconds as e.g. '3d 4h 5s', skipping zero components."""
    remaining = max(0, int(seconds))
    parts: List[str] = []
    for label, size in _DURATION_UNITS:
        value, remaining = divmod(remaining, size)
        if value:
            parts.append(f"{value}{label}")
    return " ".join(parts) or "0s"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def render_report(snapshot: SystemSnapshot) -> List[str]:
    """
    Render a snapshot as report lines.

    Lines are grouped into identity/uptime, resource usage and platform
    identification, with an empty line after each group.
    """
    return [
        f"Hostname: {snapshot.hostname}",
        f"Uptime: {format_duration(snapshot.uptime_seconds)}",
        "",
        f"Current User: {snapshot.current_user}",
        f"CPU Usage: {format_percent(snapshot.cpu_usage_percent)}",
        f"Memory Usage: {format_percent(snapshot.memory_usage_ratio * 100)}",
        f"Total Memory: {format_bytes(snapshot.total_memory_bytes)}",
        f"Disk Usage: {format_percent(snapshot.disk_usage_ratio * 100)}",
        f"Total Disk Space: {format_bytes(snapshot.total_disk_bytes)}",
        f"Home Directory: {snapshot.home_directory}",
        "",
        f"Operating System: {snapshot.os_name}",
        f"Kernel: {snapshot.kernel_version}",
        f"Architecture: {snapshot.architecture_descriptor}",
        f"CPU Cores: {snapshot.physical_core_count}",
        f"Processes: {snapshot.process_count}",
        "",
    ]
