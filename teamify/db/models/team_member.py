from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from teamify.db.base_class import Base
from teamify.db.types import StringArray


class TeamMember(Base):
    __tablename__ = "team_members"

    team_id = Column(Uuid, ForeignKey("teams.id"), primary_key=True)
    user_id = Column(String, ForeignKey("users.user_id"), primary_key=True)

    # TeamPermission values
    perms = Column(StringArray, nullable=False)

    team = relationship("Team", back_populates="members")
    user = relationship("User", back_populates="team_memberships")
