from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from teamify.db.base_class import Base
from teamify.db.types import StringArray


class Bot(Base):
    __tablename__ = "bots"
    bot_id = Column(String, primary_key=True)
    queue_name = Column(String, nullable=False)
    queue_avatar = Column(String, nullable=False)

    # Legacy ownership, cleared once the bot belongs to a team
    owner = Column(String, ForeignKey("users.user_id"), nullable=True)
    additional_owners = Column(StringArray, nullable=False, default=list)

    team_owner = Column(Uuid, ForeignKey("teams.id"), nullable=True)
    team = relationship("Team", back_populates="bots")
