from config.constants import CARTS, SAVED, USERS
from utils.jwt import decode_token


def _register(client, body):
    return client.post("/api/auth/register", json=body)


def test_register_customer_creates_cart_and_saved(client, store, customer_body):
    res = _register(client, customer_body)

    assert res.status_code == 200
    assert res.text == "User Created Successfully!"

    [user] = store.all(USERS)
    assert user["wallet"] == 0
    assert user["password"] != customer_body["password"]

    [cart] = store.all(CARTS)
    [saved] = store.all(SAVED)
    assert cart["cid"] == user["_id"]
    assert saved["cid"] == user["_id"]
    assert cart["offer"] == "NA"


def test_register_vendor_has_no_lists(client, store, vendor_body):
    res = _register(client, vendor_body)

    assert res.status_code == 200
    [user] = store.all(USERS)
    assert user["onDuty"] is False
    assert store.all(CARTS) == []
    assert store.all(SAVED) == []


def test_unrecognised_role_registers_with_customer_shape(client, store, customer_body):
    customer_body["role"] = "ADMIN"

    res = _register(client, customer_body)

    assert res.status_code == 200
    [user] = store.all(USERS)
    assert user["role"] == "ADMIN"
    assert user["wallet"] == 0
    assert store.all(CARTS) == []


def test_vendor_missing_profile_pic(client, store, vendor_body):
    del vendor_body["profilePic"]

    res = _register(client, vendor_body)

    assert res.status_code == 201
    assert res.text == '"profilePic" is required'
    assert store.writes == []


def test_duplicate_email(client, store, customer_body):
    _register(client, customer_body)
    writes = len(store.writes)

    res = _register(client, customer_body)

    assert res.status_code == 201
    assert res.text == "Email Already Registered"
    assert len(store.writes) == writes


def test_login_returns_signed_token(client, store, settings, customer_body):
    _register(client, customer_body)

    res = client.post("/api/auth/login", json={
        "email": customer_body["email"],
        "password": customer_body["password"],
    })

    assert res.status_code == 200
    claims = decode_token(res.text, settings)
    [user] = store.all(USERS)
    assert claims["id"] == user["_id"]
    assert claims["role"] == "CUSTOMER"


def test_login_unknown_email(client):
    res = client.post("/api/auth/login", json={"email": "nobody@shopmail.in", "password": "whatever"})

    assert res.status_code == 201
    assert res.text == "Invalid Email Address"


def test_login_wrong_password(client, customer_body):
    _register(client, customer_body)

    res = client.post("/api/auth/login", json={"email": customer_body["email"], "password": "wrong-pass"})

    assert res.status_code == 201
    assert res.text == "Invalid Password"


def test_forgot_password(client, customer_body):
    _register(client, customer_body)

    assert client.post("/api/auth/forgot-password", json={"email": customer_body["email"]}).status_code == 200

    res = client.post("/api/auth/forgot-password", json={"email": "nobody@shopmail.in"})
    assert res.status_code == 201
    assert res.text == "Invalid Email Address"


def test_reset_password_then_login(client, store, customer_body):
    _register(client, customer_body)
    [user] = store.all(USERS)

    res = client.post("/api/auth/reset-password", json={
        "id": user["_id"],
        "oldPassword": customer_body["password"],
        "password": "brand-new-pass",
    })

    assert res.status_code == 200
    assert res.text == "Password changed successfully, Please login again"

    login = client.post("/api/auth/login", json={"email": customer_body["email"], "password": "brand-new-pass"})
    assert login.status_code == 200
    assert store.all(USERS)[0]["fullName"] == "Asha Rao"


def test_reset_password_wrong_current(client, store, customer_body):
    _register(client, customer_body)
    [user] = store.all(USERS)

    res = client.post("/api/auth/reset-password", json={
        "id": user["_id"],
        "oldPassword": "not-the-pass",
        "password": "brand-new-pass",
    })

    assert res.status_code == 201
    assert res.text == "Invalid Current Password"


def test_reset_password_unknown_user(client):
    res = client.post("/api/auth/reset-password", json={
        "id": "missing",
        "oldPassword": "old-pass",
        "password": "new-pass",
    })

    assert res.text == "User does not exist"


def test_standard_status_codes_when_legacy_disabled(client, customer_body):
    client.app.state.legacy_error_status = False
    del customer_body["email"]

    res = _register(client, customer_body)

    assert res.status_code == 400
    assert res.text == '"email" is required'
