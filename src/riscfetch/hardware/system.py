"""
Generic host information: memory, uptime, kernel, OS, user@host.

Uses psutil for memory and boot time and the platform module for the
kernel release. Each getter falls back to a fixed default instead of
raising.
"""

import getpass
import logging
import platform
import socket
import time
from pathlib import Path
from typing import Tuple, Union

import psutil


logger = logging.getLogger(__name__)

GIB = 1024 ** 3


def get_memory_bytes() -> Tuple[int, int]:
    """(used, total) physical memory in bytes"""
    mem_info = psutil.virtual_memory()
    return mem_info.used, mem_info.total


def get_memory_info() -> str:
    """Memory usage formatted for display, e.g. "1.25 GiB / 7.66 GiB" """
    used, total = get_memory_bytes()
    return f"{used / GIB:.2f} GiB / {total / GIB:.2f} GiB"


def get_uptime_seconds() -> int:
    return max(0, int(time.time() - psutil.boot_time()))


def format_uptime(seconds: int) -> str:
    """Format uptime as "3h 5m", or "5m" below one hour"""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def get_uptime() -> str:
    return format_uptime(get_uptime_seconds())


def get_kernel_info() -> str:
    """Kernel release (uname -r), "Unknown" if not reported"""
    return platform.release() or "Unknown"


def get_os_info(os_release: Union[str, Path] = "/etc/os-release") -> str:
    """PRETTY_NAME from os-release, "Linux" if absent"""
    try:
        content = Path(os_release).read_text()
    except OSError as e:
        logger.debug("Cannot read %s: %s", os_release, e)
        return "Linux"

    for line in content.splitlines():
        if line.startswith('PRETTY_NAME='):
            name = line.split('=', 1)[1].strip().strip('"').strip("'")
            if name:
                return name

    return "Linux"


def get_user_host() -> str:
    """user@hostname of the current session"""
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        user = "unknown"
    return f"{user}@{socket.gethostname()}"
