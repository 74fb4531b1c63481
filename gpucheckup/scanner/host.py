"""Host inspector — OS, arch, CPU, hostname, RAM."""

import logging
import platform
import socket
import subprocess

from ..models import SystemInfo, current_platform

log = logging.getLogger(__name__)


def run_command(cmd: str, args: list[str], timeout: float = 5) -> str | None:
    """Run a command and return stripped stdout, or None on any failure."""
    try:
        result = subprocess.run(
            [cmd, *args],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired, OSError) as e:
        log.debug("%s failed: %s", cmd, e)
        return None
    if result.returncode != 0:
        log.debug("%s exited with %d", cmd, result.returncode)
        return None
    return result.stdout.strip()


def collect_system_info() -> SystemInfo:
    """Inspect the current machine and return a SystemInfo."""
    os_name = current_platform()
    return SystemInfo(
        os_name=os_name,
        os_version=platform.release() or "unknown",
        architecture=platform.machine() or "unknown",
        cpu_model=_get_cpu_model(os_name),
        hostname=_get_hostname(),
        ram_total_mb=_get_ram_mb(os_name),
    )


def _get_hostname() -> str:
    try:
        return socket.gethostname() or "unknown"
    except OSError:
        return "unknown"


def _get_cpu_model(os_name: str) -> str:
    if os_name == "linux":
        try:
            with open("/proc/cpuinfo") as f:
                for line in f:
                    if line.startswith("model name"):
                        return line.split(":", 1)[1].strip()
        except OSError:
            pass
    elif os_name == "macos":
        out = run_command("sysctl", ["-n", "machdep.cpu.brand_string"], timeout=2)
        if out:
            return out
    elif os_name == "windows":
        out = run_command(
            "powershell",
            ["-NoProfile", "-Command", "(Get-CimInstance Win32_Processor).Name"],
        )
        if out:
            return out.splitlines()[0].strip()
    return platform.processor() or "unknown"


def _get_ram_mb(os_name: str) -> int:
    """Total RAM in MB, 0 if detection fails."""
    try:
        if os_name == "linux":
            with open("/proc/meminfo") as f:
                for line in f:
                    if line.startswith("MemTotal:"):
                        return int(line.split()[1]) // 1024
        elif os_name == "macos":
            out = run_command("sysctl", ["-n", "hw.memsize"], timeout=2)
            if out:
                return int(out) // (1024**2)
    except (OSError, ValueError, IndexError):
        pass
    return 0
