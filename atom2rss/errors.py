"""Error taxonomy for the Atom to RSS converter."""


class ConverterError(Exception):
    """Base class for every failure that aborts a conversion."""


class FetchError(ConverterError):
    """Raised when the source feed cannot be retrieved."""


class ParseError(ConverterError):
    """Raised when the source text is not well-formed XML."""


class SerializationError(ConverterError):
    """Raised when the assembled RSS document cannot be serialized."""
