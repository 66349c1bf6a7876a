from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from teamify.db.base_class import Base
from teamify.db.types import JSONList


class User(Base):
    __tablename__ = "users"
    user_id = Column(String, primary_key=True)
    api_token = Column(String, nullable=False)
    extra_links = Column(JSONList, nullable=False, default=list)
    staff = Column(Boolean(), nullable=False, default=False)
    developer = Column(Boolean(), nullable=False, default=False)
    certified = Column(Boolean(), nullable=False, default=False)

    team_memberships = relationship("TeamMember", back_populates="user")
