from typing import FrozenSet
import uuid

from sqlalchemy.orm import Session

from teamify.db.models.team import Team
from teamify.db.models.team_member import TeamMember
from teamify.db.models.team_permission import TeamPermission
from teamify.db.permissions import perms_to_db


def create_new_team(name: str, avatar: str, db: Session) -> Team:
    """
    Inserts a new team and flushes it so its generated id is available.

    Args:
        name: Team name, the queue name of the bot it is created for.
        avatar: Team avatar, the queue avatar of that bot.
        db: SQLAlchemy session, inside the migration transaction.

    Returns:
        The newly inserted Team instance.
    """
    new_team = Team(name=name, avatar=avatar)
    db.add(new_team)
    db.flush()
    return new_team


def add_team_member(
    team_id: uuid.UUID,
    user_id: str,
    perms: FrozenSet[TeamPermission],
    db: Session,
) -> TeamMember:
    member = TeamMember(team_id=team_id, user_id=user_id, perms=perms_to_db(perms))
    db.add(member)
    db.flush()
    return member
