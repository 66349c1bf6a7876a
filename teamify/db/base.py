from teamify.db.base_class import Base  # noqa

# Import all models here
from teamify.db.models.user import User  # noqa
from teamify.db.models.team import Team  # noqa
from teamify.db.models.team_member import TeamMember  # noqa
from teamify.db.models.bot import Bot  # noqa
