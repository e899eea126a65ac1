# tarot_api/core/errors.py
from typing import Optional


class TarotServiceError(Exception):
    """Base class for failures raised by the draw-and-interpret workflow."""


class DeckFetchError(TarotServiceError):
    """The card source was unreachable or returned something that is not a deck."""


class DrawError(TarotServiceError):
    """The deck cannot supply the requested number of distinct cards."""


class LookupNotFound(TarotServiceError):
    def __init__(self, request_id: str):
        self.request_id = request_id
        super().__init__(f"No interpretation found for request {request_id}")


class InterpretationError(TarotServiceError):
    """
    The text-generation call failed. These never reach the client that asked for the
    draw, since that response has already been sent; they are only logged.
    """
    kind = "unknown"
    transient = False


class InterpretationNetworkError(InterpretationError):
    kind = "network"
    transient = True


class InterpretationTimeoutError(InterpretationError):
    kind = "timeout"
    transient = True


class InterpretationStatusError(InterpretationError):
    kind = "status"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    @property
    def transient(self) -> bool:
        return self.status_code is not None and self.status_code >= 500


class InterpretationResponseError(InterpretationError):
    kind = "malformed"


class EmptyInterpretationError(InterpretationError):
    kind = "empty"


def internal_error_message(err: Exception, prefix: str, debug: bool) -> str:
    """
    Message for a 500 body. Detailed errors are only exposed when DEBUG is on;
    otherwise clients get a generic message.
    """
    if debug:
        return f"{prefix}: {err}"
    return "Something went wrong"
