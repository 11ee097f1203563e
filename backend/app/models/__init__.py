# Models package init
"""
Shelter Admin Backend — ORM Models
====================================

Importing this package registers every table on `Base.metadata`, which
Alembic autogenerate, `create_all_tables()` and the test suite rely on.
"""

from app.models.activity import Activity
from app.models.adoption import Adoption
from app.models.adoption_record import AdoptionRecord
from app.models.donation import Donation
from app.models.notification import Notification
from app.models.pet import Pet
from app.models.rescue import Rescue
from app.models.user import User
from app.models.volunteer import Volunteer

__all__ = [
    "Activity",
    "Adoption",
    "AdoptionRecord",
    "Donation",
    "Notification",
    "Pet",
    "Rescue",
    "User",
    "Volunteer",
]
