from flask import Blueprint, current_app, request, jsonify
from werkzeug.exceptions import HTTPException
import logging

from vertex.errors import VertexError

journal_controller = Blueprint("journal_controller", __name__)


@journal_controller.route("/uploadAdminJournal", methods=["POST"])
def upload_admin_journal():
    workflows = current_app.extensions["vertex"]
    try:
        logging.info(f"Publishing journal. Content-Type: {request.content_type}")
        journal = workflows.publish.publish(request.form, request.files)
        return jsonify({
            "success": True,
            "message": "Journal published successfully!",
            "journal": journal
        }), 200
    except VertexError as e:
        return jsonify({"success": False, "message": e.message}), e.status_code
    except HTTPException:
        raise
    except Exception as e:
        logging.exception(f"Error publishing journal: {e}")
        return jsonify({"success": False, "message": "Failed to publish journal"}), 500


@journal_controller.route("/api/journals", methods=["GET"])
def list_journals():
    workflows = current_app.extensions["vertex"]
    try:
        return jsonify({"data": workflows.ledger.entries()}), 200
    except VertexError as e:
        return jsonify({"message": e.message}), e.status_code
    except Exception as e:
        logging.exception(f"Error listing journals: {e}")
        return jsonify({"message": "Failed to list journals"}), 500
