"""Schema creation and reference data seeding."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from src.shop_admin.entities.enums import PredefinedRole

_ROLE_DESCRIPTIONS = {
    PredefinedRole.ADMIN: "Administrator with full access",
    PredefinedRole.USER: "Regular user",
}


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        # Registers every table with the metadata
        import src.shop_admin.entities  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def seed_roles(self) -> int:
        """Insert the predefined roles that are missing; return how many were added."""
        from src.shop_admin.entities.core.role import RoleRepository, RoleTable

        added = 0
        with Session(self._engine) as session:
            roles = RoleRepository(session)
            for name in PredefinedRole.ALL:
                if roles.get(name) is None:
                    roles.add(RoleTable(name=name, description=_ROLE_DESCRIPTIONS[name]))
                    added += 1
            session.commit()
        if added:
            logger.info("Seeded {} predefined role(s)", added)
        return added
