import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from teamify.db.base_class import Base


class Team(Base):
    __tablename__ = "teams"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    avatar = Column(String, nullable=False)

    members = relationship("TeamMember", back_populates="team")
    bots = relationship("Bot", back_populates="team")
