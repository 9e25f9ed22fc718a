# api/errors.py


class PortalError(RuntimeError):
    """Base class for failures talking to the cupboard backend."""


class NetworkError(PortalError):
    """The request could not complete (connection refused, timeout, ...)."""


class AuthenticationFailed(PortalError):
    """
    Login did not produce a usable session token.

    Raised for bad credentials, an empty token and transport failures alike.
    The message is always generic; backend details stay in the logs.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class SubmissionRejected(PortalError):
    """
    The backend refused a household record.

    - errors: field -> message map when the backend supplied one, else None
    """

    def __init__(self, errors: dict[str, str] | None = None, status_code: int | None = None):
        super().__init__(f"Household rejected (status={status_code})")
        self.errors = errors
        self.status_code = status_code
