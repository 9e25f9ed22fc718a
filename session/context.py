from api.client import BackendClient
from auth.login_form import LoginForm
from auth.password_reset import PasswordResetForm
from households.service import HouseholdService
from households.signup_form import SignupForm
from i18n.translator import Translator
from session.auth_state import AuthState


class SessionContext:
    """
    Browser-scoped state.
    Must persist across requests.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

        # Language selection for every page rendered to this browser
        self.translator = Translator()

        # Opaque token; only AuthState writes it
        self.auth = AuthState(backend)

        self.household_service = HouseholdService(backend)

        self.login_form = LoginForm(self.auth, self.translator)
        self.reset_form = PasswordResetForm(backend, self.translator)
        self.signup_form = self.new_signup_form()

    def new_signup_form(self) -> SignupForm:
        return SignupForm(self.household_service, self.translator)

    def reset_signup(self):
        """
        A submitted form is terminal; the next visitor gets a fresh one.
        """
        self.signup_form = self.new_signup_form()

    def reset_login(self):
        self.login_form = LoginForm(self.auth, self.translator)
