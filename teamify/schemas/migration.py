import uuid
from typing import List

from pydantic import BaseModel


class MigrationReport(BaseModel):
    candidates: int = 0
    bots_migrated: int = 0
    users_created: int = 0
    team_ids: List[uuid.UUID] = []
