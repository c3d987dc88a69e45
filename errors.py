class DecodeError(Exception):
    """Base class for everything that can stop a BMP from being converted."""


class IoError(DecodeError):
    """The file could not be opened, read or seeked, or ended too early."""


class FormatError(DecodeError):
    """The file is not a BMP at all (bad signature, nonsense dimensions)."""


class UnsupportedFormatError(DecodeError):
    """A valid BMP, but not 24-bit uncompressed."""


class AllocationError(DecodeError):
    """The pixel buffer for the declared dimensions could not be allocated."""
