from flask_login import UserMixin


class Teacher(UserMixin):
    """
    The authenticated teacher for the current request.

    Nothing here is persisted: the identity comes from the provider and
    `supabase` is the client scoped to this request's access token.
    """

    role = "teacher"

    def __init__(self, id: str, email: str, supabase):
        self.id = id
        self.email = email
        self.supabase = supabase

    def __repr__(self):
        return f"<Teacher {self.id} {self.email}>"
