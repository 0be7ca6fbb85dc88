import logging
import os

from flask import Flask

from auth import DEFAULT_CREDENTIALS, auth, is_logged_in
from views import error, home, main

logging.basicConfig(level=logging.INFO)

app = Flask(__name__, static_folder="static", template_folder="templates")
app.secret_key = os.environ.get("SECRET_KEY", "secret-key")

# Swap these to change who can log in or where a login lands
app.config["LOGIN_CREDENTIALS"] = DEFAULT_CREDENTIALS
app.config["LOGIN_HOME_HANDLER"] = home
app.config["LOGIN_ERROR_HANDLER"] = error

app.register_blueprint(main)
app.register_blueprint(auth)


@app.context_processor
def inject_login_state():
    return {"is_logged_in": is_logged_in}


if __name__ == "__main__":
    app.run(debug=True, host="127.0.0.1", port=5000)
