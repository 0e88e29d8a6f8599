import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from chelto.models.registration import Registration
from chelto.services.exceptions import PersistenceError, UniqueViolation

logger = logging.getLogger(__name__)


class RecordStore:
    """Insert-only, equality-queryable view of the launch registrations table."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, record: Registration) -> int:
        try:
            self.db.add(record)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UniqueViolation(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Insert into launch_registrations failed")
            raise PersistenceError(str(e)) from e
        return record.id

    def query_equal(self, field: str, value) -> list[Registration]:
        return self.query_equal_all({field: value})

    def query_equal_all(self, filters: dict) -> list[Registration]:
        try:
            return self.db.query(Registration).filter_by(**filters).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Query on launch_registrations failed: %s", sorted(filters))
            raise PersistenceError(str(e)) from e

    def list_all(self) -> list[Registration]:
        try:
            return (
                self.db.query(Registration)
                .order_by(Registration.registered_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(str(e)) from e
