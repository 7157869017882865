from functools import wraps
from flask import abort, current_app
from flask_login import current_user

def author_required(view):
    """Question authoring and outcome withdrawal are recruiter/admin only."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user.is_authenticated:
            abort(401)
        if getattr(current_user, "role", None) not in current_app.config.get("AUTHOR_ROLES", ("admin",)):
            abort(403)
        return view(*args, **kwargs)
    return wrapped
