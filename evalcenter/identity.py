from flask_login import UserMixin


class Caller(UserMixin):
    """Acting user as verified by the platform gateway. Nothing is stored here."""

    def __init__(self, user_id, role=None):
        self.id = str(user_id)
        self.role = role or "viewer"

    def __repr__(self) -> str:
        return f"<Caller id={self.id} role={self.role!r}>"


def caller_from_headers(headers, user_header, role_header):
    user_id = (headers.get(user_header) or "").strip()
    if not user_id:
        return None
    role = (headers.get(role_header) or "").strip().lower()
    return Caller(user_id, role or None)
