from flask import Blueprint, current_app, request, jsonify
from werkzeug.exceptions import HTTPException
import logging

from vertex.errors import VertexError

auth_controller = Blueprint("auth_controller", __name__)


@auth_controller.route("/register", methods=["POST"])
def register():
    workflows = current_app.extensions["vertex"]
    try:
        user_data = request.get_json(silent=True)
        user_id = workflows.registration.register(user_data)
        return jsonify({"message": "User registered successfully", "id": user_id}), 201
    except VertexError as e:
        return jsonify({"message": e.message}), e.status_code
    except HTTPException:
        raise
    except Exception as e:
        logging.exception(f"Error during registration: {e}")
        return jsonify({"message": "Failed to register user"}), 500


@auth_controller.route("/login", methods=["POST"])
def login():
    workflows = current_app.extensions["vertex"]
    try:
        login_data = request.get_json(silent=True)
        user = workflows.login.login(login_data)
        return jsonify({"message": "Login successful", "user": user}), 200
    except VertexError as e:
        return jsonify({"message": e.message}), e.status_code
    except HTTPException:
        raise
    except Exception as e:
        logging.exception(f"Error during login: {e}")
        return jsonify({"message": "Failed to login"}), 500
