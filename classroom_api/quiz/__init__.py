"""
Quiz module: CRUD for a teacher's quizzes.

Every query runs through the request's scoped Supabase client, so
row-level security limits it to quizzes the teacher owns.
"""
from flask import Blueprint

quiz_bp = Blueprint('quiz', __name__, url_prefix='/api/quizzes')

from classroom_api.quiz import routes  # noqa: E402,F401
