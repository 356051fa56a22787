"""Input errors raised by the toolbox commands.

Every caller mistake (malformed token, unparsable key or URL, unsupported
algorithm name, out-of-range size) is a ToolError. Cryptographic
verification outcomes are never raised; see toolbox.crypto.verifier.
"""


class ToolError(Exception):
    """Base class for structural/input errors surfaced to the caller."""

    @property
    def message(self) -> str:
        return str(self)


class FormatError(ToolError):
    """The token text is not a well-formed three-segment JWT."""


class UnsupportedAlgorithm(ToolError):  # noqa: N818
    """The algorithm name is outside the supported set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported algorithm: {name}")
        self.name = name


class KeyMaterialError(ToolError):
    """Key text could not be loaded for the requested algorithm.

    Attributes:
        attempts: One message per parse attempt, in the order they ran.
    """

    def __init__(self, message: str, attempts: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.attempts = attempts


class SigningError(ToolError):
    """The payload could not be signed."""


class KeySizeError(ToolError):
    """Requested RSA modulus size is not allowed."""


class SecretLengthError(ToolError):
    """Requested shared-secret length is below the floor."""


class UrlError(ToolError):
    """A URL or URL component could not be parsed or built."""


class UuidError(ToolError):
    """A UUID could not be parsed or the generation request is invalid."""
