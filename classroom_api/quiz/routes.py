"""
Teacher routes for quiz management.

Teachers can:
- List their quizzes (newest first)
- Fetch, create, partially update and delete a quiz

A quiz that does not exist and a quiz owned by another teacher both
answer 404: row-level security hides the difference on purpose.
"""
from flask import jsonify
from flask_login import current_user

from classroom_api.common.db_utils import execute, inserted_row, project
from classroom_api.common.decorators import teacher_required
from classroom_api.common.request_utils import get_json_body, optional_text, required_text
from classroom_api.errors import NotVisible
from classroom_api.quiz import quiz_bp

QUIZ_FIELDS = ("id", "name", "description", "class", "topic", "questions", "created_at")
QUIZ_COLUMNS = ", ".join(QUIZ_FIELDS)

# Fields a teacher may set; `teacher_id` is never taken from the body
OPTIONAL_TEXT_FIELDS = ("description", "class", "topic")

QUIZ_NOT_FOUND = "Quiz not found"


def _quizzes():
    return current_user.supabase.table("quizzes")


def _sanitize_questions(value):
    return value if isinstance(value, list) else []


def _bad_request(message):
    return jsonify({"error": "Bad request", "message": message}), 400


@quiz_bp.route('/', methods=['GET'])
@teacher_required
def list_quizzes():
    """List all quizzes visible to the teacher, newest first."""
    rows = execute(
        _quizzes().select(QUIZ_COLUMNS).order("created_at", desc=True),
        "Failed to list quizzes",
    )
    return jsonify([project(row, QUIZ_FIELDS) for row in rows]), 200


@quiz_bp.route('/<quiz_id>', methods=['GET'])
@teacher_required
def get_quiz(quiz_id):
    rows = execute(
        _quizzes().select(QUIZ_COLUMNS).eq("id", quiz_id).limit(1),
        "Failed to fetch quiz",
        not_visible_message=QUIZ_NOT_FOUND,
    )
    if not rows:
        raise NotVisible(QUIZ_NOT_FOUND)
    return jsonify(project(rows[0], QUIZ_FIELDS)), 200


@quiz_bp.route('/', methods=['POST'])
@teacher_required
def create_quiz():
    """
    Create a quiz owned by the authenticated teacher.

    Request body:
    {
        "name": "Algebra",          // required
        "description": "...",       // optional
        "class": "8",               // optional
        "topic": "Equations",       // optional
        "questions": [{...}, ...]   // optional, anything but a list becomes []
    }
    """
    data = get_json_body()

    name = required_text(data.get("name"))
    if not name:
        return _bad_request("name is required")

    payload = {
        "teacher_id": current_user.id,
        "name": name,
        "questions": _sanitize_questions(data.get("questions")),
    }
    for field in OPTIONAL_TEXT_FIELDS:
        payload[field] = optional_text(data.get(field))

    rows = execute(_quizzes().insert(payload), "Failed to create quiz")
    return jsonify(project(inserted_row(rows, "Failed to create quiz"), QUIZ_FIELDS)), 201


@quiz_bp.route('/<quiz_id>', methods=['PATCH'])
@teacher_required
def update_quiz(quiz_id):
    """
    Partially update a quiz.

    Only the fields present in the body are written; absent fields are
    left untouched.
    """
    data = get_json_body()
    payload = {}

    if "name" in data:
        name = required_text(data["name"])
        if not name:
            return _bad_request("name cannot be empty")
        payload["name"] = name

    for field in OPTIONAL_TEXT_FIELDS:
        if field in data:
            payload[field] = optional_text(data[field])

    if "questions" in data:
        payload["questions"] = _sanitize_questions(data["questions"])

    if not payload:
        return _bad_request("No fields to update")

    rows = execute(
        _quizzes().update(payload).eq("id", quiz_id),
        "Failed to update quiz",
        not_visible_message=QUIZ_NOT_FOUND,
    )
    if not rows:
        raise NotVisible(QUIZ_NOT_FOUND)
    return jsonify(project(rows[0], QUIZ_FIELDS)), 200


@quiz_bp.route('/<quiz_id>', methods=['DELETE'])
@teacher_required
def delete_quiz(quiz_id):
    rows = execute(
        _quizzes().delete().eq("id", quiz_id),
        "Failed to delete quiz",
        not_visible_message=QUIZ_NOT_FOUND,
    )
    if not rows:
        raise NotVisible(QUIZ_NOT_FOUND)
    return "", 204
