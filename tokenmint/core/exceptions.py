"""Fatal error types raised while aggregating balances or planning a mint.

None of these are recoverable within a run: the CLI reports the message and
exits with a non-zero status.
"""


class TokenMintError(Exception):
    """Base exception for every fatal tokenmint condition."""

    pass


class BalanceInputError(TokenMintError):
    """Raised when a balance directory or file cannot be read or parsed."""

    pass


class SanityCheckError(TokenMintError):
    """Raised when an amount is outside the range the tool accepts.

    Usually a missed decimal point in a balance file.
    """

    pass


class BalanceOverflowError(TokenMintError):
    """Raised when an accumulated balance exceeds the unsigned 64-bit range."""

    pass


class AuditWriteError(TokenMintError):
    """Raised when the mint audit file cannot be written."""

    pass
