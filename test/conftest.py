"""
Pytest configuration and fixtures for testing.

Supabase is replaced by an in-memory fake that validates tokens,
signs teachers in and applies row-level security the way the real
policies do: a client only sees and writes rows whose teacher_id is
the owner of its access token.
"""
import copy
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from postgrest import APIError
from supabase import AuthError

TEACHER_A = {"id": str(uuid.uuid4()), "email": "ada@school.edu", "password": "correct-horse"}
TEACHER_B = {"id": str(uuid.uuid4()), "email": "bob@school.edu", "password": "battery-staple"}
TOKENS = {"token-a": TEACHER_A, "token-b": TEACHER_B}


class FakeAuthError(AuthError):
    """Provider auth error with a stable constructor across supabase versions."""

    def __init__(self, message, status=400):
        Exception.__init__(self, message)
        self.message = message
        self.status = status
        self.code = None


class FakeBackend:
    """Shared state standing in for the Supabase project."""

    def __init__(self):
        self.tables = {"quizzes": [], "students": []}
        self.clients = []
        self.fail_next = None
        # PostgREST may answer an insert without returning the representation
        self.return_inserted = True
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def now(self):
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def owner_of(self, token):
        user = TOKENS.get(token)
        return user["id"] if user else None


class FakeQuery:
    DEFAULTS = {
        "quizzes": {"description": None, "class": None, "topic": None, "questions": []},
        "students": {"number": None, "class": None, "div": None, "roll_number": None},
    }

    def __init__(self, backend, table, token):
        self.backend = backend
        self.table = table
        self.token = token
        self.operation = None
        self.payload = None
        self.columns = None
        self.filters = []
        self.ordering = None
        self.row_limit = None

    def select(self, columns):
        self.operation = "select"
        self.columns = [c.strip() for c in columns.split(",")]
        return self

    def insert(self, payload):
        self.operation, self.payload = "insert", payload
        return self

    def update(self, payload):
        self.operation, self.payload = "update", payload
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, size):
        self.row_limit = size
        return self

    def _matching(self, rows):
        for column, value in self.filters:
            if column == "id":
                try:
                    uuid.UUID(str(value))
                except ValueError:
                    raise APIError({
                        "message": f'invalid input syntax for type uuid: "{value}"',
                        "code": "22P02",
                    })
            rows = [row for row in rows if row.get(column) == value]
        return rows

    def execute(self):
        if self.backend.fail_next is not None:
            error, self.backend.fail_next = self.backend.fail_next, None
            raise error

        owner = self.backend.owner_of(self.token)
        table = self.backend.tables[self.table]
        visible = [row for row in table if owner is not None and row["teacher_id"] == owner]

        if self.operation == "insert":
            if owner is None or self.payload.get("teacher_id") != owner:
                raise APIError({
                    "message": f'new row violates row-level security policy for table "{self.table}"',
                    "code": "42501",
                })
            row = copy.deepcopy(self.DEFAULTS[self.table])
            row.update(copy.deepcopy(self.payload))
            row["id"] = str(uuid.uuid4())
            row["created_at"] = self.backend.now()
            table.append(row)
            return SimpleNamespace(data=[copy.deepcopy(row)] if self.backend.return_inserted else [])

        rows = self._matching(visible)

        if self.operation == "update":
            for row in rows:
                row.update(copy.deepcopy(self.payload))
            return SimpleNamespace(data=copy.deepcopy(rows))

        if self.operation == "delete":
            for row in rows:
                table.remove(row)
            return SimpleNamespace(data=copy.deepcopy(rows))

        if self.ordering:
            column, desc = self.ordering
            rows = sorted(rows, key=lambda row: row[column], reverse=desc)
        if self.row_limit is not None:
            rows = rows[:self.row_limit]
        return SimpleNamespace(data=[{c: copy.deepcopy(row.get(c)) for c in self.columns} for row in rows])


class FakeAuth:
    def __init__(self, backend):
        self.backend = backend

    def get_user(self, jwt=None):
        if jwt == "token-expired":
            raise FakeAuthError("invalid JWT: token is expired", status=401)
        if jwt == "token-boom":
            raise RuntimeError("identity provider unreachable")
        user = TOKENS.get(jwt)
        if user is None:
            return SimpleNamespace(user=None)
        return SimpleNamespace(user=SimpleNamespace(id=user["id"], email=user["email"]))

    def sign_in_with_password(self, credentials):
        for token, user in TOKENS.items():
            if user["email"] == credentials["email"] and user["password"] == credentials["password"]:
                return SimpleNamespace(
                    session=SimpleNamespace(
                        access_token=token,
                        refresh_token=f"refresh-{token}",
                        expires_at=1893456000,
                    ),
                    user=SimpleNamespace(id=user["id"], email=user["email"]),
                )
        raise FakeAuthError("Invalid login credentials")


class FakeSession:
    """Stands in for an httpx.Client owned by a supabase client."""

    def __init__(self):
        self.is_closed = False

    def close(self):
        self.is_closed = True


class FakeClient:
    def __init__(self, backend, url, key):
        self.backend = backend
        self.url = url
        self.key = key
        self.token = None
        self.auth = FakeAuth(backend)
        self.auth._http_client = FakeSession()
        self.postgrest = SimpleNamespace(auth=self._authorize, session=FakeSession())

    @property
    def is_closed(self):
        return self.postgrest.session.is_closed and self.auth._http_client.is_closed

    def _authorize(self, token):
        self.token = token

    def table(self, name):
        return FakeQuery(self.backend, name, self.token)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(monkeypatch, backend):
    """Create application for testing against the fake provider."""
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("FRONTEND_ORIGIN", "http://localhost:5173")
    monkeypatch.delenv("VERCEL", raising=False)

    def fake_create_client(url, key, options=None):
        client = FakeClient(backend, url, key)
        backend.clients.append(client)
        return client

    monkeypatch.setattr("classroom_api.supabase_client.create_client", fake_create_client)

    from classroom_api import create_app
    app = create_app()
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def unconfigured_app(monkeypatch):
    """Application with no provider credentials in the environment."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    monkeypatch.setenv("FLASK_ENV", "testing")

    from classroom_api import create_app
    with pytest.warns(UserWarning):
        app = create_app()
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def teacher():
    return TEACHER_A


@pytest.fixture
def other_teacher():
    return TEACHER_B


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer token-a"}


@pytest.fixture
def other_auth_headers():
    return {"Authorization": "Bearer token-b"}
