from typing import List

from pydantic import BaseModel


class BotCandidate(BaseModel):
    """A bot that still has additional owners and needs a team."""

    bot_id: str
    queue_name: str
    queue_avatar: str
    owner: str
    additional_owners: List[str]
