"""
Moves bots with additional owners over to team ownership.

Every bot that still lists additional owners gets a team of its own, named
and styled after the bot's queue name and avatar. The bot's owner joins it
with the OWNER permission, each additional owner joins with the added-owner
permissions (and gets a user row first if they never had one), and the bot
is then pointed at the team with its legacy owner fields cleared.

Everything happens in one transaction: either every bot is migrated or the
database is left exactly as it was.

Usage:
    python migrate_bots_to_teams.py
"""
import sys
import uuid
from typing import Optional, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from teamify.db.permissions import ADDED_OWNER_PERMS, OWNER_PERMS
from teamify.db.repository.bot import (
    count_bots_with_additional_owners,
    get_bots_with_additional_owners,
    move_bot_to_team,
)
from teamify.db.repository.team import add_team_member, create_new_team
from teamify.db.repository.user import check_user_exists, create_new_user
from teamify.db.session import engine as default_engine
from teamify.schemas.bot import BotCandidate
from teamify.schemas.migration import MigrationReport


class MigrationError(ValueError):
    pass


class InvalidAdditionalOwnerError(MigrationError):
    def __init__(self, bot_id: str, user_id: str):
        self.bot_id = bot_id
        self.user_id = user_id
        super().__init__(f"Invalid additional owner {user_id!r} on bot {bot_id}")


def validate_additional_owner(bot_id: str, user_id: str) -> str:
    if not user_id.replace(" ", ""):
        raise InvalidAdditionalOwnerError(bot_id, user_id)
    return user_id


def migrate_bot(bot: BotCandidate, db: Session) -> Tuple[int, uuid.UUID]:
    """
    Creates the team for one bot and hands the bot over to it.

    Returns:
        The number of users created for additional owners, and the new team id.
    """
    print(
        f"Updating {bot.bot_id} ({bot.queue_name}) to team {bot.owner} "
        f"with additional owners {bot.additional_owners}"
    )

    team = create_new_team(bot.queue_name, bot.queue_avatar, db)
    add_team_member(team.id, bot.owner, OWNER_PERMS, db)

    users_created = 0
    for additional_owner in bot.additional_owners:
        validate_additional_owner(bot.bot_id, additional_owner)

        if not check_user_exists(additional_owner, db):
            print(f"Adding user {additional_owner} to the database")
            create_new_user(additional_owner, db)
            users_created += 1

        add_team_member(team.id, additional_owner, ADDED_OWNER_PERMS, db)

    move_bot_to_team(bot.bot_id, team.id, db)
    return users_created, team.id


def migrate_bots_to_teams(engine: Engine) -> MigrationReport:
    """
    Runs the whole migration against the given engine.

    Any error raised while migrating rolls back every write made so far
    and is re-raised to the caller.
    """
    report = MigrationReport()

    with Session(engine) as db:
        report.candidates = count_bots_with_additional_owners(db)
    print(f"Going to update {report.candidates} bots to teams")

    with Session(engine) as db, db.begin():
        for bot in get_bots_with_additional_owners(db):
            users_created, team_id = migrate_bot(bot, db)
            report.bots_migrated += 1
            report.users_created += users_created
            report.team_ids.append(team_id)

    print(
        f"Migration complete. {report.bots_migrated} bots moved to teams, "
        f"{report.users_created} users created."
    )
    return report


def run(engine: Optional[Engine] = None) -> MigrationReport:
    if engine is None:
        engine = default_engine

    try:
        return migrate_bots_to_teams(engine)
    except Exception as e:
        print(f"Migration failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        engine.dispose()


def main():
    run()


if __name__ == "__main__":
    main()
