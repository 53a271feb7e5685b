class ConversionError(Exception):
    """Base class for errors raised while converting a TTML document."""


class FormatError(ConversionError):
    """The document is not XML or carries no EBU-TT version metadata."""


class UnsupportedVersionError(ConversionError):
    """The EBU-TT version metadata names a version other than v1.0."""


class TimestampParseError(ConversionError):
    """A cue's begin or end attribute does not match HH:MM:SS.fff."""
