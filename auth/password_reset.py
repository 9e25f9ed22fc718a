# auth/password_reset.py

import logging

from api.client import BackendClient
from api.errors import NetworkError
from i18n.translator import Translator

logger = logging.getLogger(__name__)

SEND_RESET_EMAIL_ENDPOINT = "/send-password-reset-email"
RESET_PASSWORD_ENDPOINT = "/reset-password"


class PasswordResetForm:
    """
    Two steps, both fire-and-forget from the user's point of view:

    1. request_reset(email): backend emails a link carrying a reset id
    2. set_new_password(reset_id, password): from that link

    Outcome is exposed as `message` (success) or `error`; nothing raises.
    """

    def __init__(self, backend: BackendClient, translator: Translator):
        self.backend = backend
        self.translator = translator
        self.email = ""
        self.message = None
        self.error = None

    def _post(self, path: str, body: dict) -> bool:
        try:
            resp = self.backend.post_json(path, body)
        except NetworkError as e:
            logger.error("Password reset request failed: %s", e)
            return False
        if not resp.ok:
            logger.warning("Password reset rejected (path=%s, status=%s)", path, resp.status_code)
        return resp.ok

    def request_reset(self, email: str) -> bool:
        self.email = (email or "").strip()
        self.message = None
        self.error = None

        if self.email and self._post(SEND_RESET_EMAIL_ENDPOINT, {"email": self.email}):
            self.message = self.translator.t("reset.sent")
            return True

        self.error = self.translator.t("reset.failed")
        return False

    def set_new_password(self, reset_id: str, new_password: str) -> bool:
        self.message = None
        self.error = None

        if not reset_id or not new_password:
            self.error = self.translator.t("misc.fieldrequired")
            return False

        body = {"resetPasswordId": reset_id, "newPassword": new_password}
        if self._post(RESET_PASSWORD_ENDPOINT, body):
            self.message = self.translator.t("reset.done")
            return True

        self.error = self.translator.t("reset.setfailed")
        return False
