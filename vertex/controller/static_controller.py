from flask import Blueprint, current_app, redirect, send_from_directory, url_for
from werkzeug.exceptions import NotFound
import os

static_controller = Blueprint("static_controller", __name__)


def send_first_match(directories, filename):
    for directory in directories:
        try:
            return send_from_directory(directory, filename)
        except NotFound:
            continue
    raise NotFound()


@static_controller.route("/", defaults={"filename": "index.html"}, methods=["GET"])
@static_controller.route("/<path:filename>", methods=["GET"])
def serve_file(filename):
    root = current_app.config["CONTENT_ROOT"]
    return send_first_match([root, os.path.join(root, "public")], filename)


@static_controller.route("/login", methods=["GET"])
def login_directory():
    return redirect(url_for("static_controller.serve_login_file"), code=301)


@static_controller.route("/login/", defaults={"filename": "index.html"}, methods=["GET"])
@static_controller.route("/login/<path:filename>", methods=["GET"])
def serve_login_file(filename):
    root = current_app.config["CONTENT_ROOT"]
    return send_first_match([os.path.join(root, "login"), os.path.join(root, "public", "login")], filename)
