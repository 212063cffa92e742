"""
Chirpy Backend — Chirp Validator
=================================

What:  Turns an untrusted chirp payload into exactly one ChirpResult.
Who:   Called by POST /api/validate_chirp.

Validation order:
    1. Payload does not parse into ChirpRequest  → Rejected(INVALID_BODY)
       (not an object, or `body` is not a string; a missing `body` is "")
    2. Body longer than MAX_CHIRP_LENGTH         → Rejected(TOO_LONG)
    3. Otherwise                                 → Accepted(censored body)

Length is counted in UTF-8 bytes, so a chirp of multi-byte characters
reaches the limit sooner than its character count suggests.

The validator is pure: it reads only the static forbidden-word set, and
never raises for bad input. Turning a rejection into an HTTP error is the
route's job (see Rejected.to_exception).
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from chirpy.exceptions import ChirpTooLongError, MalformedRequestError
from chirpy.schemas.chirp import ChirpRequest
from chirpy.services.censor import FORBIDDEN_WORDS, censor

logger = logging.getLogger(__name__)

MAX_CHIRP_LENGTH = 140


class RejectionReason(str, enum.Enum):
    TOO_LONG = "too long"
    INVALID_BODY = "invalid body"


@dataclass(frozen=True)
class Accepted:
    cleaned_body: str


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    length: Optional[int] = None

    def to_exception(self) -> Exception:
        """Map the rejection onto the application exception for its HTTP status."""
        if self.reason is RejectionReason.TOO_LONG:
            return ChirpTooLongError(length=self.length or 0, max_length=MAX_CHIRP_LENGTH)
        return MalformedRequestError()


ChirpResult = Union[Accepted, Rejected]


def chirp_length(body: str) -> int:
    """Length of a chirp body in raw string units (UTF-8 bytes)."""
    return len(body.encode("utf-8"))


def validate_chirp(payload: Any) -> ChirpResult:
    """
    Validate a decoded JSON payload and censor its body.

    Args:
        payload: Anything json.loads could produce, or a ChirpRequest.

    Returns:
        Accepted with the cleaned body, or Rejected with the reason.
    """
    if isinstance(payload, ChirpRequest):
        request = payload
    else:
        try:
            request = ChirpRequest.model_validate(payload)
        except PydanticValidationError as e:
            logger.debug("Chirp payload rejected: %d validation error(s)", e.error_count())
            return Rejected(reason=RejectionReason.INVALID_BODY)

    length = chirp_length(request.body)
    if length > MAX_CHIRP_LENGTH:
        return Rejected(reason=RejectionReason.TOO_LONG, length=length)

    return Accepted(cleaned_body=censor(request.body, FORBIDDEN_WORDS))
