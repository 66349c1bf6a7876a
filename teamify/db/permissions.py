"""Permission profiles handed out when a bot's owners become a team.

The original owner keeps full control of the team. Additional owners get
everything needed to manage the bot itself, but cannot manage team
membership, set vanity, edit the team or delete bots.
"""
from typing import FrozenSet, List

from teamify.db.models.team_permission import TeamPermission

OWNER_PERMS: FrozenSet[TeamPermission] = frozenset({TeamPermission.OWNER})

ADDED_OWNER_PERMS: FrozenSet[TeamPermission] = frozenset(
    {
        TeamPermission.EDIT_BOT_SETTINGS,
        TeamPermission.ADD_NEW_BOTS,
        TeamPermission.RESUBMIT_BOTS,
        TeamPermission.CERTIFY_BOTS,
        TeamPermission.RESET_BOT_TOKEN,
        TeamPermission.EDIT_BOT_WEBHOOKS,
        TeamPermission.TEST_BOT_WEBHOOKS,
    }
)


def perms_to_db(profile: FrozenSet[TeamPermission]) -> List[str]:
    """
    Converts a permission profile into the list stored in team_members.perms.

    Permissions are written in declaration order so every member with the
    same profile gets an identical array.
    """
    return [perm.value for perm in TeamPermission if perm in profile]
