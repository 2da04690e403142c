"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The numeric identifier of the user (``sub`` claim)
    email
        The user's email address at issuance
    role
        The user's role at issuance
    issued_at
        Token issuance timestamp
    exp
        Token expiration timestamp
    """

    user_id: int
    email: str
    role: str
    issued_at: datetime
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
