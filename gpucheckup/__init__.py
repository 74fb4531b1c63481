"""gpucheckup — local GPU / driver diagnostics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gpucheckup")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

DISCLAIMER = (
    "gpucheckup is an unofficial community tool, not affiliated with or "
    "endorsed by NVIDIA Corporation."
)
