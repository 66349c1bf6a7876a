import enum


class TeamPermission(str, enum.Enum):
    """Every team permission that exists as of this migration."""

    EDIT_BOT_SETTINGS = "EDIT_BOT_SETTINGS"
    ADD_NEW_BOTS = "ADD_NEW_BOTS"
    RESUBMIT_BOTS = "RESUBMIT_BOTS"
    CERTIFY_BOTS = "CERTIFY_BOTS"
    RESET_BOT_TOKEN = "RESET_BOT_TOKEN"
    EDIT_BOT_WEBHOOKS = "EDIT_BOT_WEBHOOKS"
    TEST_BOT_WEBHOOKS = "TEST_BOT_WEBHOOKS"
    SET_BOT_VANITY = "SET_BOT_VANITY"
    EDIT_TEAM_NAME_AVATAR = "EDIT_TEAM_NAME_AVATAR"
    ADD_TEAM_MEMBERS = "ADD_TEAM_MEMBERS"
    REMOVE_TEAM_MEMBERS = "REMOVE_TEAM_MEMBERS"
    EDIT_TEAM_MEMBER_PERMISSIONS = "EDIT_TEAM_MEMBER_PERMISSIONS"
    DELETE_BOTS = "DELETE_BOTS"
    OWNER = "OWNER"
