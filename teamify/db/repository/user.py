import secrets
import string

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from teamify.core.config import settings
from teamify.db.models.user import User

API_TOKEN_ALPHABET = string.ascii_letters + string.digits


def generate_api_token(length: int = settings.API_TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(API_TOKEN_ALPHABET) for _ in range(length))


def check_user_exists(user_id: str, db: Session) -> bool:
    count = db.scalar(select(func.count()).select_from(User).where(User.user_id == user_id))
    return bool(count)


def create_new_user(user_id: str, db: Session) -> User:
    """
    Creates a bare user for someone who owns a bot but never logged in.

    They get a fresh API token, no extra links and none of the staff,
    developer or certified flags.
    """
    new_user = User(
        user_id=user_id,
        api_token=generate_api_token(),
        extra_links=[],
        staff=False,
        developer=False,
        certified=False,
    )
    db.add(new_user)
    db.flush()
    return new_user
