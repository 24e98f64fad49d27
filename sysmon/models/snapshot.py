from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SystemSnapshot(BaseModel):
    """Domain model describing one complete snapshot of the local machine."""

    model_config = ConfigDict(frozen=True)

    hostname: str = Field(..., min_length=1, description="System hostname")
    uptime_seconds: int = Field(
        ...,
        ge=0,
        description="Number of seconds since the system was booted",
    )
    current_user: str = Field(
        ...,
        min_length=1,
        description="Name of the invoking user, taken from the USER variable",
    )
    cpu_usage_percent: float = Field(
        ...,
        description="Global CPU utilisation in percent, reported as sampled",
    )
    memory_usage_ratio: float = Field(
        ...,
        ge=0,
        le=1,
        description="Used memory divided by total memory",
    )
    total_memory_bytes: int = Field(..., ge=0, description="Total RAM in bytes")
    disk_usage_ratio: float = Field(
        ...,
        ge=0,
        le=1,
        description="Used space divided by total space across mounted volumes",
    )
    total_disk_bytes: int = Field(
        ...,
        ge=0,
        description="Total space in bytes across mounted volumes",
    )
    home_directory: Path = Field(..., description="Home directory of the current user")
    os_name: str = Field(..., description="Operating system name")
    kernel_version: str = Field(..., description="Kernel release string")
    architecture_descriptor: str = Field(..., description="Machine architecture")
    physical_core_count: int = Field(
        ...,
        ge=0,
        description="Physical CPU cores; 0 if the platform cannot tell",
    )
    process_count: int = Field(
        ...,
        ge=1,
        description="Number of processes currently enumerated",
    )
