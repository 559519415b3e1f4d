from typing import Any, Dict, Optional


class ScanError(Exception):
    """Base for errors that map onto a JSON error response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(ScanError):
    """Missing or malformed client input."""

    status_code = 400


class PaymentError(ScanError):
    """
    Payment proof absent or invalid.
    Carries the payment instructions so the caller can pay and resubmit.
    """

    status_code = 402

    def __init__(
        self,
        message: str,
        *,
        instructions: Dict[str, Any],
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.instructions = instructions
        self.reason = reason

    def payload(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"error": self.message}
        if self.reason:
            out["reason"] = self.reason
        out.update(self.instructions)
        return out


class UpstreamError(ScanError):
    """A collaborator call (explorer / LLM) failed or timed out."""

    status_code = 500


class DataError(ScanError):
    """A collaborator answered with an unexpected shape."""

    status_code = 200
