from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """Caller identity extracted from a validated bearer token.

    Carried through the request via FastAPI's dependency system.
    Endpoints receive this instead of a raw token string.

    user_id is the token subject and doubles as the primary key of the
    caller's User record (if one has been created yet). Platform roles
    are NOT carried here: student/teacher is a property of the stored
    User and is looked up by the guards on every call.
    """

    user_id: str
