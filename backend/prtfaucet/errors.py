class FaucetError(Exception):
    """Base error; ``message`` is shown to the end user as-is."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAddress(FaucetError):
    status_code = 400

    def __init__(self, message: str = "Invalid wallet address."):
        super().__init__(message)


class InvalidAmount(FaucetError):
    status_code = 400

    def __init__(self, message: str = "Amount must be between 1 and 1000."):
        super().__init__(message)


class SubmissionFailure(FaucetError):
    """Network, signing or contract-revert failure while broadcasting."""

    GENERIC = "Failed to send transaction. Please check server logs."

    def __init__(self, reason: str | None = None):
        super().__init__(reason or self.GENERIC)
        self.reason = reason


class WalletRejection(FaucetError):
    """The connected wallet declined or failed to send a transaction."""

    status_code = 400


class UnauthorizedOwner(FaucetError):
    status_code = 403

    def __init__(self, message: str = "Error: Unauthorised Owner"):
        super().__init__(message)


class ChainUnavailable(FaucetError):
    status_code = 503

    def __init__(self, message: str = "RPC endpoint unavailable."):
        super().__init__(message)
