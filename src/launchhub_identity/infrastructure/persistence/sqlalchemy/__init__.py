"""SQLAlchemy implementation for launchhub_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel / FreelancerProfileModel: table mappings
- UserRepositorySQLAlchemy / FreelancerProfileRepositorySQLAlchemy
- SQLAlchemyIdentityUnitOfWork: one transaction per service call
- Engine, session factory and schema helpers
"""

from launchhub_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from launchhub_identity.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_engine_from_settings,
    create_session_maker,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.models import (
    FreelancerProfileModel,
    UserModel,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    FreelancerProfileRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyIdentityUnitOfWork,
)

__all__ = [
    "FreelancerProfileModel",
    "FreelancerProfileRepositorySQLAlchemy",
    "IdentityBase",
    "SQLAlchemyIdentityUnitOfWork",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_engine_from_settings",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
