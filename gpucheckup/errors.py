"""Exception types."""


class GpuCheckupError(Exception):
    """Base class for gpucheckup errors."""


class LoadError(GpuCheckupError):
    """Rule catalog is missing, unreadable, or does not match the schema."""
