import logging

from flask import Blueprint, current_app, render_template, request, session

logger = logging.getLogger(__name__)

auth = Blueprint("auth", __name__)

DEFAULT_CREDENTIALS = (
    ("matt", "smith"),
    ("admin", "admin"),
)

LOGIN_TEMPLATE = "loginForm.html"
BAD_LOGIN_MESSAGE = "bad username or password"


def check_credentials(username, password, credentials=None):
    """
    True if (username, password) matches one of the known pairs.
    Comparison is exact and case sensitive; anything that is not a string
    (including a missing field) never matches.
    """
    if credentials is None:
        credentials = DEFAULT_CREDENTIALS

    if not isinstance(username, str) or not isinstance(password, str):
        return False

    return any(
        username == known_user and password == known_password
        for known_user, known_password in credentials
    )


def is_logged_in():
    return "username" in session


def _home():
    return current_app.config["LOGIN_HOME_HANDLER"]()


def _error(message):
    return current_app.config["LOGIN_ERROR_HANDLER"](message)


@auth.route("/login", methods=["GET"])
def login_form():
    return render_template(LOGIN_TEMPLATE)


@auth.route("/login", methods=["POST"])
def process_login():
    username = request.form.get("username")
    password = request.form.get("password")

    credentials = current_app.config.get("LOGIN_CREDENTIALS", DEFAULT_CREDENTIALS)
    if check_credentials(username, password, credentials):
        session["username"] = username
        logger.info("User %s logged in", username)
        return _home()

    logger.warning("Failed login attempt for %r", username)
    return _error(BAD_LOGIN_MESSAGE)


@auth.route("/logout")
def logout():
    # drops everything, not just the username
    session.clear()
    logger.info("Session cleared")
    return _home()
