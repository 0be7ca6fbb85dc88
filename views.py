from flask import Blueprint, render_template, session

main = Blueprint("main", __name__)


@main.route("/")
def home():
    return render_template("home.html", username=session.get("username"))


def error(message):
    """Error page. Called directly by other views, not routed."""
    return render_template("error.html", message=message)
