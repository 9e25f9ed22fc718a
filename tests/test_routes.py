from api.client import ApiResponse


def _login(client, post_json, token="tok"):
    post_json.return_value = ApiResponse(200, {"sessionToken": token})
    return client.post("/login", data={"email": "staff@cupboard.org", "password": "secret"})


HEAD_FORM = {
    "head-firstName": "Ana",
    "head-lastName": "Lopez",
    "head-dobMonth": "03",
    "head-dobDay": "09",
    "head-dobYear": "1980",
}


# -------------------------------------------------
# Gating
# -------------------------------------------------

def test_home_redirects_to_login_when_unauthenticated(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")


def test_login_then_home(client, post_json):
    resp = _login(client, post_json)
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")

    home = client.get("/")
    assert home.status_code == 200
    assert "Welcome to the Food Bank Management App!" in home.get_data(as_text=True)


def test_login_page_redirects_when_authenticated(client, post_json):
    _login(client, post_json)

    resp = client.get("/login")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_empty_token_login_stays_unauthenticated(client, post_json):
    resp = _login(client, post_json, token="")

    assert resp.status_code == 401
    html = resp.get_data(as_text=True)
    assert "Invalid email or password" in html
    assert 'name="password" value=""' in html
    assert 'value="staff@cupboard.org"' in html
    assert client.get("/").status_code == 302


def test_logout(client, post_json):
    _login(client, post_json)

    resp = client.get("/logout")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")
    assert client.get("/").status_code == 302


def test_sessions_are_isolated(portal, post_json):
    portal_app, _ = portal
    staff = portal_app.app.test_client()
    visitor = portal_app.app.test_client()

    _login(staff, post_json)

    assert staff.get("/").status_code == 200
    assert visitor.get("/").status_code == 302


# -------------------------------------------------
# Password reset
# -------------------------------------------------

def test_reset_password_request(client, post_json):
    resp = client.post("/reset-password", data={"email": "ana@example.com"})

    assert resp.status_code == 200
    assert "Password reset email sent" in resp.get_data(as_text=True)
    post_json.assert_called_once_with("/send-password-reset-email", {"email": "ana@example.com"})


def test_reset_password_link_shows_new_password_form(client):
    html = client.get("/reset-password?resetPasswordId=01HZXRESET").get_data(as_text=True)

    assert 'name="newPassword"' in html
    assert 'value="01HZXRESET"' in html


def test_reset_password_set_new(client, post_json):
    resp = client.post("/reset-password", data={"resetPasswordId": "01HZXRESET", "newPassword": "n3w"})

    assert "Your password has been reset" in resp.get_data(as_text=True)
    post_json.assert_called_once_with(
        "/reset-password", {"resetPasswordId": "01HZXRESET", "newPassword": "n3w"}
    )


# -------------------------------------------------
# Signup
# -------------------------------------------------

def test_signup_page_renders(client):
    resp = client.get("/signup")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Community Cupboard Sign-Up Form" in html
    assert 'name="head-firstName"' in html


def test_signup_add_member_keeps_typed_values(client):
    resp = client.post("/signup", data={"head-firstName": "Ana", "action": "add_member"})

    html = resp.get_data(as_text=True)
    assert 'name="member-1-firstName"' in html
    assert 'value="Ana"' in html


def test_signup_remove_member(client):
    client.post("/signup", data={"action": "add_member"})
    client.post("/signup", data={"action": "add_member"})
    resp = client.post("/signup", data={"member-1-firstName": "Luis", "member-2-firstName": "Sofia", "action": "remove_member:1"})

    html = resp.get_data(as_text=True)
    assert 'name="member-1-firstName"' not in html
    assert 'name="member-2-firstName"' in html
    assert 'value="Sofia"' in html


def test_signup_add_member_button_hidden_at_cap(client):
    for _ in range(5):
        resp = client.post("/signup", data={"action": "add_member"})

    html = resp.get_data(as_text=True)
    assert 'value="add_member"' not in html
    assert 'name="member-5-firstName"' in html


def test_signup_submit_success(client, post_json):
    post_json.return_value = ApiResponse(201, {"id": "01HZX"})
    client.post("/signup", data={"action": "add_member"})

    data = dict(HEAD_FORM)
    data.update({"member-1-firstName": "Luis", "member-1-lastName": "Lopez", "action": "submit"})
    resp = client.post("/signup", data=data)

    assert "Thank You" in resp.get_data(as_text=True)
    path, body = post_json.call_args.args
    assert path == "/household"
    assert body["head"]["dob"] == "1980-03-09"
    assert [m["firstName"] for m in body["members"]] == ["Luis"]

    # a fresh form for the next household
    html = client.get("/signup").get_data(as_text=True)
    assert 'value="Ana"' not in html


def test_signup_local_validation(client, post_json):
    resp = client.post("/signup", data={"head-firstName": "Ana", "action": "submit"})

    html = resp.get_data(as_text=True)
    assert "This field is required" in html
    assert 'value="Ana"' in html
    post_json.assert_not_called()


def test_signup_backend_field_errors(client, post_json):
    post_json.return_value = ApiResponse(400, {"errors": {"firstName": "required"}})

    resp = client.post("/signup", data={**HEAD_FORM, "action": "submit"})

    html = resp.get_data(as_text=True)
    assert "invalid-feedback\">required<" in html
    assert 'value="Lopez"' in html


def test_signup_generic_error(client, post_json):
    post_json.return_value = ApiResponse(500, {})

    resp = client.post("/signup", data={**HEAD_FORM, "action": "submit"})

    assert "An error occurred" in resp.get_data(as_text=True)


# -------------------------------------------------
# Language
# -------------------------------------------------

def test_lang_query_param(client):
    html = client.get("/signup?lang=es").get_data(as_text=True)

    assert "Nombre" in html
    assert "Formulario de Inscripción de Community Cupboard" in html


def test_lang_switch_redirects_back_without_stale_param(client):
    resp = client.get("/lang/es", headers={"Referer": "http://localhost/signup?lang=en"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/signup")
    assert "Nombre" in client.get("/signup").get_data(as_text=True)


def test_lang_switch_without_referrer_goes_to_signup(client):
    resp = client.get("/lang/es")
    assert resp.headers["Location"].endswith("/signup")


def test_signup_backend_dob_error_shown_under_date_selects(client, post_json):
    post_json.return_value = ApiResponse(400, {"errors": {"dob": "invalid date"}})

    resp = client.post("/signup", data={**HEAD_FORM, "action": "submit"})

    html = resp.get_data(as_text=True)
    assert 'text-danger small mt-1">invalid date<' in html
    assert "This field is required" not in html


def test_session_contexts_are_bounded(portal, monkeypatch):
    portal_app, _ = portal
    monkeypatch.setattr(portal_app, "MAX_SESSION_CONTEXTS", 2)

    for _ in range(3):
        portal_app.app.test_client().get("/signup")

    assert len(portal_app.SESSION_CONTEXTS) == 2
