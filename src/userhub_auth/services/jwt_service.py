"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone

import jwt

from userhub_auth.exceptions import InvalidTokenError
from userhub_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are self-contained: they carry the subject id, email and role
    and are validated purely by signature and expiry. The service holds
    only the secret and the default lifetime, so a single instance can be
    shared by all requests.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(1, "user@example.com", "user")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    1
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "email", "role", "iat", "exp")

    def __init__(
        self,
        secret_key: str,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expire_hours
            Hours until a token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=expire_hours)

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expire.total_seconds())

    def create_access_token(
        self,
        user_id: int,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's numeric identifier
        email
            The user's email address
        role
            The user's role label
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )

            return TokenPayload(
                user_id=int(payload["sub"]),
                email=payload["email"],
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
