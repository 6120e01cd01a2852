import hmac
from flask import current_app, session

AUTH_FLAG = "is_authenticated"


class AdminSession:
    """
    The only place that reads or writes the admin login flag.

    Views and decorators go through this object instead of poking at
    flask.session directly, so the backing store can change without
    touching them. The default store is Flask's signed session cookie.
    """

    def __init__(self, store=None):
        self._store = session if store is None else store

    @property
    def is_authenticated(self) -> bool:
        return bool(self._store.get(AUTH_FLAG))

    def login(self, username: str, password: str) -> bool:
        if not credentials_match(username, password):
            return False
        self._store.clear()
        self._store[AUTH_FLAG] = True
        if hasattr(self._store, "permanent"):
            self._store.permanent = True
        return True

    def logout(self) -> None:
        self._store.clear()


def credentials_match(username, password) -> bool:
    expected_user = current_app.config["ADMIN_USERNAME"]
    expected_password = current_app.config["ADMIN_PASSWORD"]
    # Both comparisons always run so timing does not reveal which one failed
    user_ok = hmac.compare_digest((username or "").encode(), expected_user.encode())
    password_ok = hmac.compare_digest((password or "").encode(), expected_password.encode())
    return user_ok and password_ok
