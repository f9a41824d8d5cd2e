"""
Supabase client provider.

Two kinds of client are handed out:

- one anon client per application, built at startup and used only to
  exchange an email/password for a session;
- one scoped client per request, whose PostgREST session carries the
  caller's access token so that row-level security evaluates every
  query as that teacher.

Scoped clients are never cached or shared between requests.
"""
from flask import Flask, g
from supabase import Client, ClientOptions, create_client


def _server_options() -> ClientOptions:
    # The server keeps no session state of its own
    return ClientOptions(auto_refresh_token=False, persist_session=False)


class SupabaseProvider:
    """Flask extension holding the provider credentials and the anon client."""

    def __init__(self, app: Flask = None):
        self._url = ""
        self._key = ""
        self._anon_client = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        self._url = app.config.get("SUPABASE_URL", "")
        self._key = app.config.get("SUPABASE_ANON_KEY", "")
        self._anon_client = (
            create_client(self._url, self._key, options=_server_options())
            if self.is_configured else None
        )
        app.extensions["supabase"] = self
        app.teardown_request(self.teardown_request)

    @property
    def is_configured(self) -> bool:
        return bool(self._url and self._key)

    @property
    def anon_client(self) -> Client | None:
        """Unauthenticated client used for password login, or None when not configured."""
        return self._anon_client

    def scoped_client(self, access_token: str) -> Client:
        """
        Build a fresh client whose database queries run as the token's owner.

        The client is remembered on `g` and released when the request
        tears down.
        """
        client = create_client(self._url, self._key, options=_server_options())
        client.postgrest.auth(access_token)
        g.scoped_supabase_client = client
        return client

    @staticmethod
    def release(client: Client) -> None:
        """Close the HTTP sessions a scoped client opened."""
        client.postgrest.session.close()
        auth_http = getattr(client.auth, "_http_client", None)
        if auth_http is not None:
            auth_http.close()

    def teardown_request(self, exc=None) -> None:
        client = g.pop("scoped_supabase_client", None)
        if client is not None:
            self.release(client)
