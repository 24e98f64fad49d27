import logging
import os
import platform
from typing import Optional, Set, Tuple

import psutil

from sysmon.config import get_settings
from sysmon.models.errors import PlatformQueryFailure

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


def _os_name() -> str:
    """Distribution name from /etc/os-release on Linux, platform.system() otherwise."""
    if platform.system() == "Linux":
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            release = {}
        name = release.get("NAME", "").strip()
        if name:
            return name
    return platform.system() or UNKNOWN


def _disk_totals() -> Tuple[int, int]:
    """
    Sum (used, total) bytes over all mounted volumes.

    Pseudo-filesystems without an fstype are skipped (except on Windows where
    fstype is empty for mapped drives), and every device is counted once even
    if it is mounted at several places.
    """
    used = 0
    total = 0
    seen: Set[str] = set()
    for part in psutil.disk_partitions(all=False):
        if not (os.name == "nt" or part.fstype):
            continue
        if part.device in seen:
            continue
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (PermissionError, FileNotFoundError) as exc:
            logger.debug("Skipping unreadable mount %s: %s", part.mountpoint, exc)
            continue
        seen.add(part.device)
        total += usage.total
        used += usage.total - usage.free

    if not seen:
        # Containers often expose only nodev mounts; fall back to the root volume
        usage = psutil.disk_usage(_root_mountpoint())
        total, used = usage.total, usage.total - usage.free
    return used, total


def _root_mountpoint() -> str:
    drive = os.path.splitdrive(os.getcwd())[0]
    return drive + os.sep if drive else os.sep


class PlatformStats:
    """
    Handle on the OS statistics subsystem.

    All counters are sampled together by refresh(); reading a counter before
    the first refresh is a programming error.
    """

    def __init__(self, cpu_sample_interval: Optional[float] = None) -> None:
        if cpu_sample_interval is None:
            cpu_sample_interval = get_settings().cpu_sample_interval
        self.cpu_sample_interval = cpu_sample_interval
        self._refreshed = False

        self._cpu_usage_percent = 0.0
        self._used_memory = 0
        self._total_memory = 0
        self._used_disk = 0
        self._total_disk = 0
        self._physical_cores = 0
        self._process_count = 0
        self._os_name = UNKNOWN
        self._kernel_version = UNKNOWN
        self._architecture = UNKNOWN

    def refresh(self) -> "PlatformStats":
        try:
            self._cpu_usage_percent = psutil.cpu_percent(interval=self.cpu_sample_interval)

            vm = psutil.virtual_memory()
            self._total_memory = vm.total
            self._used_memory = vm.total - vm.available

            self._used_disk, self._total_disk = _disk_totals()
            self._physical_cores = psutil.cpu_count(logical=False) or 0
            self._process_count = len(psutil.pids())
        except (psutil.Error, OSError) as exc:
            raise PlatformQueryFailure(
                f"could not refresh system statistics: {exc}"
            ) from exc

        self._os_name = _os_name()
        self._kernel_version = platform.release() or UNKNOWN
        self._architecture = platform.machine() or UNKNOWN
        self._refreshed = True

        logger.debug(
            "Refreshed statistics: cpu=%.1f%% mem=%d/%d disk=%d/%d procs=%d",
            self._cpu_usage_percent,
            self._used_memory,
            self._total_memory,
            self._used_disk,
            self._total_disk,
            self._process_count,
        )
        return self

    def _require_refresh(self) -> None:
        if not self._refreshed:
            raise RuntimeError("PlatformStats.refresh() must be called before reading counters")

    @property
    def cpu_usage_percent(self) -> float:
        self._require_refresh()
        return self._cpu_usage_percent

    @property
    def used_memory(self) -> int:
        self._require_refresh()
        return self._used_memory

    @property
    def total_memory(self) -> int:
        self._require_refresh()
        return self._total_memory

    @property
    def used_disk(self) -> int:
        self._require_refresh()
        return self._used_disk

    @property
    def total_disk(self) -> int:
        self._require_refresh()
        return self._total_disk

    @property
    def physical_core_count(self) -> int:
        self._require_refresh()
        return self._physical_cores

    @property
    def process_count(self) -> int:
        self._require_refresh()
        return self._process_count

    @property
    def os_name(self) -> str:
        self._require_refresh()
        return self._os_name

    @property
    def kernel_version(self) -> str:
        self._require_refresh()
        return self._kernel_version

    @property
    def architecture(self) -> str:
        self._require_refresh()
        return self._architecture
