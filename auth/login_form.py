# auth/login_form.py

import logging

from api.errors import AuthenticationFailed
from i18n.translator import Translator
from session.auth_state import AuthState

logger = logging.getLogger(__name__)


class LoginForm:
    def __init__(self, auth: AuthState, translator: Translator):
        self.auth = auth
        self.translator = translator
        self.email = ""
        self.password = ""
        self.error = None

    def submit(self, email: str, password: str) -> bool:
        """
        Returns True once the session holds a token. On failure the email is
        kept for correction and the password is cleared.
        """
        self.error = None
        self.email = (email or "").strip()
        self.password = password or ""

        try:
            self.auth.login(self.email, self.password)
        except AuthenticationFailed:
            logger.info("Login failed for %s", self.email)
            self.error = self.translator.t("login.failed")
            self.password = ""
            return False

        self.password = ""
        return True
