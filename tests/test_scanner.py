"""Tests for fact collectors."""

import subprocess

from gpucheckup.models import DriverInfo, FactSnapshot, SystemInfo
from gpucheckup.scanner import collect_facts, collect_system_info, gpu, host

SMI_CSV = """0, NVIDIA GeForce RTX 4090, 550.54.14, 24564, 41
1, NVIDIA GeForce GTX 1050, 550.54.14, 2048, [N/A]
"""

SMI_BANNER = """+-----------------------------------------------------------------------------+
| NVIDIA-SMI 550.54.14    Driver Version: 550.54.14    CUDA Version: 12.4     |
|-------------------------------+----------------------+----------------------+
"""


def test_parse_gpu_csv():
    gpus, driver_version = gpu.parse_gpu_csv(SMI_CSV)
    assert driver_version == "550.54.14"
    assert [g.index for g in gpus] == [0, 1]
    assert gpus[0].name == "NVIDIA GeForce RTX 4090"
    assert gpus[0].vram_total_mb == 24564
    assert gpus[0].temperature_c == 41
    assert gpus[1].temperature_c == 0  # [N/A] -> unknown
    assert all(g.is_nvidia and g.vendor == "NVIDIA" for g in gpus)


def test_parse_gpu_csv_skips_short_lines():
    gpus, driver_version = gpu.parse_gpu_csv("garbage line\n\n0, RTX, 535.1, 8192, 50\n")
    assert len(gpus) == 1
    assert driver_version == "535.1"


def test_parse_cuda_version():
    assert gpu.parse_cuda_version(SMI_BANNER) == "12.4"
    assert gpu.parse_cuda_version("no banner") == ""
    assert gpu.parse_cuda_version("") == ""


def test_collect_gpu_info_without_nvidia_smi(monkeypatch):
    monkeypatch.setattr(gpu, "run_command", lambda cmd, args, timeout=5: None)
    gpus, driver = gpu.collect_gpu_info()
    assert gpus == ()
    assert driver == DriverInfo()


def test_collect_gpu_info_with_nvidia_smi(monkeypatch):
    def fake_run(cmd, args, timeout=5):
        return SMI_CSV.strip() if args else SMI_BANNER
    monkeypatch.setattr(gpu, "run_command", fake_run)
    gpus, driver = gpu.collect_gpu_info()
    assert len(gpus) == 2
    assert driver == DriverInfo(version="550.54.14", cuda_version="12.4")


def test_run_command_missing_binary():
    assert host.run_command("definitely-not-a-real-binary-xyz", []) is None


def test_run_command_timeout(monkeypatch):
    def boom(*args, **kwargs):
        raise subprocess.TimeoutExpired(cmd="nvidia-smi", timeout=5)
    monkeypatch.setattr(host.subprocess, "run", boom)
    assert host.run_command("nvidia-smi", []) is None


def test_collect_system_info():
    info = collect_system_info()
    assert isinstance(info, SystemInfo)
    assert info.os_name in ("linux", "windows", "macos")
    assert info.ram_total_mb >= 0


def test_collect_facts(monkeypatch):
    monkeypatch.setattr(gpu, "run_command", lambda cmd, args, timeout=5: None)
    facts = collect_facts()
    assert isinstance(facts, FactSnapshot)
    assert facts.gpus == ()
    assert facts.driver.version == ""


def test_parse_gpu_csv_name_with_bare_comma():
    gpus, driver_version = gpu.parse_gpu_csv("0, NVIDIA RTX A2000 8GB,Laptop, 535.1, 8192, 77\n")
    assert gpus[0].name == "NVIDIA RTX A2000 8GB,Laptop"
    assert driver_version == "535.1"
    assert gpus[0].vram_total_mb == 8192
    assert gpus[0].temperature_c == 77
