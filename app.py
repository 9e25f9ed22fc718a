from flask import Flask, render_template, request, redirect, session
from dotenv import load_dotenv
import logging
import os
import uuid
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlparse

from api.client import BackendClient, DEFAULT_API_URL, DEFAULT_TIMEOUT
from session.context import SessionContext
from households.models import (
    GENDER_CHOICES,
    LANGUAGE_CHOICES,
    RACE_CHOICES,
    RELATIONSHIP_CHOICES,
    day_options,
    month_options,
    year_options,
)
from households.signup_form import HEAD, field_input_name
from i18n.translations import LANGUAGE_NAMES


# -------------------------------------------------
# Setup
# -------------------------------------------------

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parent

app = Flask(
    __name__,
    template_folder=str(ROOT_DIR / "templates"),
    static_folder=str(ROOT_DIR / "static"),
)
app.secret_key = os.getenv("FLASK_SECRET_KEY", "dev-secret")

backend = BackendClient(
    os.getenv("CUPBOARD_API_URL", DEFAULT_API_URL),
    timeout=float(os.getenv("CUPBOARD_API_TIMEOUT", DEFAULT_TIMEOUT)),
)

SESSION_CONTEXTS = {}
# Oldest browsers are forgotten first (dict keeps insertion order)
MAX_SESSION_CONTEXTS = max(1, int(os.getenv("CUPBOARD_MAX_SESSIONS", "1000")))

HOME_ROUTE = "/"
LOGIN_ROUTE = "/login"
SIGNUP_ROUTE = "/signup"


# -------------------------------------------------
# Helpers: session context
# -------------------------------------------------

def get_session_context():
    if "session_id" not in session:
        session["session_id"] = str(uuid.uuid4())

    sid = session["session_id"]
    if sid not in SESSION_CONTEXTS:
        while len(SESSION_CONTEXTS) >= MAX_SESSION_CONTEXTS:
            SESSION_CONTEXTS.pop(next(iter(SESSION_CONTEXTS)))
        SESSION_CONTEXTS[sid] = SessionContext(backend)
    return SESSION_CONTEXTS[sid]


@app.before_request
def apply_lang_param():
    # ?lang=es works on any page, like the emailed/printed links do
    lang = request.args.get("lang")
    if lang:
        get_session_context().translator.set_language(lang)


@app.context_processor
def inject_view_helpers():
    ctx = get_session_context()
    return {
        "t": ctx.translator.t,
        "lang": ctx.translator.language,
        "languages": LANGUAGE_NAMES,
        "is_authenticated": ctx.auth.is_authenticated(),
        "field_name": field_input_name,
        "HEAD": HEAD,
        "gender_choices": GENDER_CHOICES,
        "race_choices": RACE_CHOICES,
        "language_choices": LANGUAGE_CHOICES,
        "relationship_choices": RELATIONSHIP_CHOICES,
        "month_options": month_options(),
        "day_options": day_options(),
        "year_options": year_options(),
    }


# -------------------------------------------------
# Routes
# -------------------------------------------------

@app.route("/")
def index():
    ctx = get_session_context()
    if not ctx.auth.is_authenticated():
        return redirect(LOGIN_ROUTE)
    return render_template("home.html")


@app.route("/login", methods=["GET"])
def login_page():
    ctx = get_session_context()
    if ctx.auth.is_authenticated():
        return redirect(HOME_ROUTE)
    return render_template("login.html", form=ctx.login_form)


@app.route("/login", methods=["POST"])
def login_submit():
    ctx = get_session_context()
    if ctx.auth.is_authenticated():
        return redirect(HOME_ROUTE)

    form = ctx.login_form
    ok = form.submit(
        email=request.form.get("email", ""),
        password=request.form.get("password", ""),
    )
    if ok:
        ctx.reset_login()
        return redirect(HOME_ROUTE)

    return render_template("login.html", form=form), 401


@app.route("/logout")
def logout():
    ctx = get_session_context()
    return redirect(ctx.auth.logout())


@app.route("/reset-password", methods=["GET"])
def reset_password_page():
    ctx = get_session_context()
    form = ctx.reset_form
    form.message = None
    form.error = None
    return render_template(
        "reset_password.html",
        form=form,
        reset_id=request.args.get("resetPasswordId", ""),
    )


@app.route("/reset-password", methods=["POST"])
def reset_password_submit():
    ctx = get_session_context()
    form = ctx.reset_form

    reset_id = request.form.get("resetPasswordId", "").strip()
    if reset_id:
        form.set_new_password(reset_id, request.form.get("newPassword", ""))
        if form.error is None:
            # link is single-use; go back to the email step view
            reset_id = ""
    else:
        form.request_reset(request.form.get("email", ""))

    return render_template("reset_password.html", form=form, reset_id=reset_id)


@app.route("/signup", methods=["GET"])
def signup_page():
    ctx = get_session_context()
    return render_template("signup.html", form=ctx.signup_form)


@app.route("/signup", methods=["POST"])
def signup_submit():
    """
    Every button on the signup page posts the whole form:
    - action=add_member
    - action=remove_member:<id>
    - action=submit (default)
    Field values are bound first so nothing typed is lost.
    """
    ctx = get_session_context()
    form = ctx.signup_form
    form.apply(request.form)

    action = request.form.get("action", "submit")

    if action == "add_member":
        form.add_member()
    elif action.startswith("remove_member:"):
        _, _, raw_id = action.partition(":")
        if raw_id.isdigit():
            form.remove_member(int(raw_id))
    else:
        if form.submit():
            ctx.reset_signup()
            return render_template("signup_success.html")

    return render_template("signup.html", form=form)


@app.route("/lang/<code>")
def set_language(code):
    ctx = get_session_context()
    ctx.translator.set_language(code)
    return redirect(_local_target(request.referrer) or SIGNUP_ROUTE)


def _local_target(url):
    """
    Only ever bounce back within the portal, and drop a stale ?lang= that
    would undo the switch.
    """
    if not url:
        return None
    parsed = urlparse(url)
    if not parsed.path.startswith("/"):
        return None
    query = urlencode([(k, v) for k, v in parse_qsl(parsed.query) if k != "lang"])
    return parsed.path + ("?" + query if query else "")


if __name__ == "__main__":
    app.run(debug=True)
