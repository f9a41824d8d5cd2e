"""
Teacher routes for the student roster.

Only listing and creation are exposed.
"""
from flask import jsonify
from flask_login import current_user

from classroom_api.common.db_utils import execute, inserted_row, project
from classroom_api.common.decorators import teacher_required
from classroom_api.common.request_utils import get_json_body, optional_trimmed_text, required_text
from classroom_api.student import student_bp

STUDENT_FIELDS = ("id", "name", "email", "number", "class", "div", "roll_number", "created_at")
STUDENT_COLUMNS = ", ".join(STUDENT_FIELDS)

OPTIONAL_FIELDS = ("number", "class", "div", "roll_number")


def _students():
    return current_user.supabase.table("students")


@student_bp.route('/', methods=['GET'])
@teacher_required
def list_students():
    """List all students visible to the teacher, newest first."""
    rows = execute(
        _students().select(STUDENT_COLUMNS).order("created_at", desc=True),
        "Failed to list students",
    )
    return jsonify([project(row, STUDENT_FIELDS) for row in rows]), 200


@student_bp.route('/', methods=['POST'])
@teacher_required
def create_student():
    """
    Add a student to the teacher's roster.

    Request body:
    {
        "name": "Asha",             // required
        "email": "asha@school.edu", // required
        "number": "...", "class": "...", "div": "...", "roll_number": "..."
    }
    Blank optional values are stored as null.
    """
    data = get_json_body()

    name = required_text(data.get("name"))
    if not name:
        return jsonify({"error": "Bad request", "message": "name is required"}), 400
    email = required_text(data.get("email"))
    if not email:
        return jsonify({"error": "Bad request", "message": "email is required"}), 400

    payload = {"teacher_id": current_user.id, "name": name, "email": email}
    for field in OPTIONAL_FIELDS:
        payload[field] = optional_trimmed_text(data.get(field))

    rows = execute(_students().insert(payload), "Failed to create student")
    return jsonify(project(inserted_row(rows, "Failed to create student"), STUDENT_FIELDS)), 201
