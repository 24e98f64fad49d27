from enum import Enum


class ErrorKind(str, Enum):
    """Which data source a snapshot collection failed on."""

    PLATFORM_QUERY = "platform_query"
    IO = "io"
    KERNEL_FACILITY = "kernel_facility"


_LABELS = {
    ErrorKind.PLATFORM_QUERY: "Platform query",
    ErrorKind.IO: "IO",
    ErrorKind.KERNEL_FACILITY: "Kernel facility",
}


class CollectorError(Exception):
    """
    Base class for every failure raised by the snapshot collector.

    Subclasses fix the ``kind`` tag; the wrapped library exception, if any,
    is kept as ``__cause__``.
    """

    kind: ErrorKind

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{_LABELS[self.kind]} error: {self.detail}"


class PlatformQueryFailure(CollectorError):
    """Statistics subsystem could not be refreshed or returned unusable data."""

    kind = ErrorKind.PLATFORM_QUERY


class IOFailure(CollectorError):
    """Hostname, user or home directory could not be determined."""

    kind = ErrorKind.IO


class KernelFacilityFailure(CollectorError):
    """Uptime source could not be queried."""

    kind = ErrorKind.KERNEL_FACILITY
