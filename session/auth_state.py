# session/auth_state.py

import logging

from api.client import BackendClient
from api.errors import AuthenticationFailed, NetworkError

logger = logging.getLogger(__name__)

LOGIN_ROUTE = "/login"


class AuthState:
    """
    Holds the opaque session token for one browser.

    Token is None when unauthenticated. Nothing else writes it.
    No expiry or refresh tracking: the backend is the source of truth.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend
        self.token = None

    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, email: str, password: str):
        # A failed attempt must not leave an older token behind
        self.token = None

        try:
            resp = self.backend.post_json("/login", {"email": email, "password": password})
        except NetworkError as e:
            logger.error("Failed to authenticate: %s", e)
            raise AuthenticationFailed() from None

        if not resp.ok:
            logger.warning("Login rejected (status=%s)", resp.status_code)
            raise AuthenticationFailed()

        token = resp.data.get("sessionToken")
        if not token or not isinstance(token, str):
            logger.warning("Login succeeded without a session token; treating as failure")
            raise AuthenticationFailed()

        self.token = token

    def logout(self) -> str:
        """
        Drop the token. Returns the route the caller should navigate to.
        """
        self.token = None
        return LOGIN_ROUTE
