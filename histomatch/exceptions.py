"""
Exception hierarchy for Histomatch.

DecodeError is recovered per pair inside the comparator. Everything else
aborts the run and is reported by the CLI orchestrator.
"""


class HistomatchError(Exception):
    """Base class for all Histomatch errors."""


class DecodeError(HistomatchError):
    """An image file is missing, unreadable, corrupt or not an image."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot decode {self.path}: {reason}")


class UnsupportedPixelFormat(HistomatchError):
    """Pixel data cannot yield a luminance value."""


class DirectoryReadError(HistomatchError):
    """A directory cannot be listed."""


class CopyError(HistomatchError):
    """A file could not be copied into the output directory."""

    def __init__(self, source, destination, reason):
        self.source = str(source)
        self.destination = str(destination)
        super().__init__(f"Cannot copy {self.source} -> {self.destination}: {reason}")


class ConfigurationError(HistomatchError):
    """Invalid or missing configuration value."""


__all__ = [
    'HistomatchError',
    'DecodeError',
    'UnsupportedPixelFormat',
    'DirectoryReadError',
    'CopyError',
    'ConfigurationError',
]
