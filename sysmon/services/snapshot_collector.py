import logging
import os
import socket
from pathlib import Path
from typing import Callable, Mapping, Optional

from pydantic import ValidationError

from sysmon.config import Settings, get_settings
from sysmon.models.errors import CollectorError, IOFailure, PlatformQueryFailure
from sysmon.models.snapshot import SystemSnapshot
from sysmon.services.kernel_info import KernelInfo
from sysmon.services.platform_stats import PlatformStats

logger = logging.getLogger(__name__)


def resolve_home_directory(environ: Mapping[str, str]) -> Optional[Path]:
    """
    Home directory for the current user: HOME (USERPROFILE on Windows) first,
    then the password database entry for the current uid.
    """
    for key in ("HOME", "USERPROFILE"):
        value = environ.get(key)
        if value:
            return Path(value)

    try:
        import pwd
    except ImportError:
        return None
    try:
        return Path(pwd.getpwuid(os.getuid()).pw_dir)
    except KeyError:
        return None


def _ratio(used: int, total: int, resource: str) -> float:
    if total <= 0:
        raise PlatformQueryFailure(f"total {resource} reported as {total} bytes")
    return used / total


class SnapshotCollector:
    """
    Collect a SystemSnapshot from live OS queries.

    Every collaborator is injectable so tests can swap in fakes. Each call to
    collect() creates fresh handles and re-queries everything; the first
    failing query aborts the call with a classified CollectorError.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stats_factory: Callable[..., PlatformStats] = PlatformStats,
        kernel_factory: Callable[[], KernelInfo] = KernelInfo,
        hostname_getter: Callable[[], str] = socket.gethostname,
        home_resolver: Callable[[Mapping[str, str]], Optional[Path]] = resolve_home_directory,
        settings: Optional[Settings] = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self.stats_factory = stats_factory
        self.kernel_factory = kernel_factory
        self.hostname_getter = hostname_getter
        self.home_resolver = home_resolver
        self.settings = settings or get_settings()

    def collect(self) -> SystemSnapshot:
        try:
            return self._collect()
        except CollectorError as exc:
            logger.info("Snapshot collection failed: %s", exc)
            raise

    def _collect(self) -> SystemSnapshot:
        stats = self.stats_factory(cpu_sample_interval=self.settings.cpu_sample_interval)
        stats.refresh()
        kernel = self.kernel_factory()
        logger.debug("Statistics and kernel handles initialised")

        hostname = self._hostname()
        uptime_seconds = kernel.uptime_seconds()
        current_user = self._current_user()
        cpu_usage_percent = stats.cpu_usage_percent
        memory_usage_ratio = _ratio(stats.used_memory, stats.total_memory, "memory")
        disk_usage_ratio = _ratio(stats.used_disk, stats.total_disk, "disk space")
        home_directory = self._home_directory()

        process_count = stats.process_count
        if process_count < 1:
            raise PlatformQueryFailure("process table enumeration returned no entries")

        try:
            snapshot = SystemSnapshot(
                hostname=hostname,
                uptime_seconds=uptime_seconds,
                current_user=current_user,
                cpu_usage_percent=cpu_usage_percent,
                memory_usage_ratio=memory_usage_ratio,
                total_memory_bytes=stats.total_memory,
                disk_usage_ratio=disk_usage_ratio,
                total_disk_bytes=stats.total_disk,
                home_directory=home_directory,
                os_name=stats.os_name,
                kernel_version=stats.kernel_version,
                architecture_descriptor=stats.architecture,
                physical_core_count=stats.physical_core_count,
                process_count=process_count,
            )
        except ValidationError as exc:
            raise PlatformQueryFailure(f"inconsistent system statistics: {exc}") from exc

        logger.debug("Collected snapshot for %s", snapshot.hostname)
        return snapshot

    def _hostname(self) -> str:
        try:
            hostname = self.hostname_getter()
        except OSError as exc:
            raise IOFailure(f"could not resolve hostname: {exc}") from exc
        if not hostname:
            raise IOFailure("hostname is empty")
        return hostname

    def _current_user(self) -> str:
        user = self.environ.get("USER")
        if not user:
            raise IOFailure("environment variable USER is not set")
        return user

    def _home_directory(self) -> Path:
        home = self.home_resolver(self.environ)
        if home is None:
            raise IOFailure("could not determine home directory")
        try:
            is_dir = home.is_dir()
        except OSError as exc:
            raise IOFailure(f"could not access home directory {home}: {exc}") from exc
        if not is_dir:
            raise IOFailure(f"home directory {home} does not exist")
        return home


def collect_snapshot() -> SystemSnapshot:
    """Collect a snapshot with the live OS sources and the process environment."""
    return SnapshotCollector().collect()
