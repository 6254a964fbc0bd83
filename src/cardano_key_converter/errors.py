"""
Key Converter Errors

Exception hierarchy shared by the key file reader, the key encoder and the
wallet client. Every stage re-raises its own failures with a stage prefix so
the final message reads as a chain of context (outer operation -> cause).
"""


class KeyConverterError(Exception):
    """Base exception for key conversion errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def with_context(self, context: str) -> "KeyConverterError":
        """
        Return a copy of this error with ``context`` prepended to its message.

        The copy keeps the concrete error class and its attributes, so callers
        can still catch the specific failure after several wrapping layers.

        Args:
            context: Stage or operation description

        Returns:
            New error of the same class
        """
        wrapped = self.__class__.__new__(self.__class__)
        wrapped.__dict__.update(self.__dict__)
        wrapped.message = f"{context}: {self.message}"
        wrapped.args = (wrapped.message,)
        return wrapped


class KeyFileNotFoundError(KeyConverterError):
    """Private key file does not exist"""

    def __init__(self, path: str):
        super().__init__(f"Private key file not found at path: {path}")
        self.path = path


class KeyFileReadError(KeyConverterError):
    """Private key file exists but could not be read"""

    pass


class UnrecognizedKeyFormatError(KeyConverterError):
    """File content matched none of the accepted key formats"""

    pass


class InvalidCborHexInputError(KeyConverterError):
    """Encoder received empty or non-string input"""

    pass


class InvalidCborPrefixError(KeyConverterError):
    """CBOR hex is missing the 32-byte bytestring tag"""

    pass


class InvalidKeyLengthError(KeyConverterError):
    """Key payload has the wrong number of hex characters"""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Invalid private key length: expected {expected} characters, got {actual}")
        self.expected = expected
        self.actual = actual


class Bech32EncodingError(KeyConverterError):
    """Bech32 encoding (or decoding) of the key failed"""

    pass


class WalletClientError(KeyConverterError):
    """Remote wallet client operation failed"""

    pass


class WalletNotSelectedError(WalletClientError):
    """Wallet client used before a private key was selected"""

    pass
