import uuid
from typing import List

from sqlalchemy import Select, Update, func, select, update
from sqlalchemy.orm import Session

from teamify.db.models.bot import Bot
from teamify.schemas.bot import BotCandidate


def has_additional_owners(dialect_name: str):
    """
    Builds the "additional_owners is not empty" filter for a database dialect.

    Postgres stores the column as text[], SQLite (tests) as a JSON list.
    """
    if dialect_name == "postgresql":
        return func.cardinality(Bot.additional_owners) > 0
    return func.json_array_length(Bot.additional_owners) > 0


def select_bots_with_additional_owners(dialect_name: str) -> Select:
    return select(
        Bot.bot_id,
        Bot.queue_name,
        Bot.queue_avatar,
        Bot.owner,
        Bot.additional_owners,
    ).where(has_additional_owners(dialect_name))


def bot_to_team_update(bot_id: str, team_id: uuid.UUID) -> Update:
    return (
        update(Bot)
        .where(Bot.bot_id == bot_id)
        .values(owner=None, team_owner=team_id, additional_owners=[])
    )


def count_bots_with_additional_owners(db: Session) -> int:
    dialect_name = db.get_bind().dialect.name
    count = db.scalar(
        select(func.count()).select_from(Bot).where(has_additional_owners(dialect_name))
    )
    return int(count or 0)


def get_bots_with_additional_owners(db: Session) -> List[BotCandidate]:
    """
    Fetches every bot that still has additional owners.

    The rows are read up front: the migration rewrites the same rows it is
    reading, and the result set must not shift underneath it.
    """
    rows = db.execute(
        select_bots_with_additional_owners(db.get_bind().dialect.name)
    ).all()
    return [BotCandidate.model_validate(dict(row._mapping)) for row in rows]


def move_bot_to_team(bot_id: str, team_id: uuid.UUID, db: Session) -> None:
    """Drops the legacy owner fields of a bot and points it at its team."""
    db.execute(bot_to_team_update(bot_id, team_id))
