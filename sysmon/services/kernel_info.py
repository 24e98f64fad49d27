import time

import psutil

from sysmon.models.errors import KernelFacilityFailure


class KernelInfo:
    """Handle on the kernel facility that reports the boot time."""

    def __init__(self) -> None:
        try:
            self._boot_time = psutil.boot_time()
        except (psutil.Error, OSError) as exc:
            raise KernelFacilityFailure(f"could not read boot time: {exc}") from exc

    def uptime_seconds(self) -> int:
        # Wall clock adjustments can put "now" before the recorded boot time
        return max(0, int(time.time() - self._boot_time))
