"""
Host information printed alongside benchmark results.
"""

import os
import platform
from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of the machine a benchmark ran on."""

    python_implementation: str
    python_version: str
    platform: str
    machine: str
    cpu_count: Optional[int]
    memory_gb: Optional[int]

    @property
    def runtime(self) -> str:
        return f"{self.python_implementation} {self.python_version}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


def _total_memory_gb() -> Optional[int]:
    """Physical memory rounded to whole gigabytes, if the OS reports it."""
    try:
        total = os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        return None
    return round(total / 1024 / 1024 / 1024)


def collect_system_info() -> SystemInfo:
    """Collect runtime, platform, CPU and memory details."""
    return SystemInfo(
        python_implementation=platform.python_implementation(),
        python_version=platform.python_version(),
        platform=platform.system().lower(),
        machine=platform.machine(),
        cpu_count=os.cpu_count(),
        memory_gb=_total_memory_gb(),
    )
