from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chelto.core import config
from chelto.models.rate_limit import RateLimitHit
from chelto.services.exceptions import PersistenceError


def _window_start(minutes: int | None) -> datetime:
    minutes = config.REGISTRATION_RATE_WINDOW_MINUTES if minutes is None else minutes
    return datetime.utcnow() - timedelta(minutes=minutes)


def is_rate_limited(
    db: Session,
    ip: str,
    action: str,
    limit: int | None = None,
    minutes: int | None = None,
) -> bool:
    limit = config.REGISTRATION_RATE_LIMIT if limit is None else limit
    since = _window_start(minutes)
    try:
        count = (
            db.query(RateLimitHit)
            .filter(
                RateLimitHit.ip_address == ip,
                RateLimitHit.action == action,
                RateLimitHit.created_at >= since,
            )
            .count()
        )
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError(str(e)) from e
    return count >= limit


def record_action(db: Session, ip: str, action: str, minutes: int | None = None) -> None:
    """Record a hit and drop hits that have fallen out of the window."""
    since = _window_start(minutes)
    try:
        db.query(RateLimitHit).filter(RateLimitHit.created_at < since).delete(
            synchronize_session=False
        )
        db.add(RateLimitHit(ip_address=ip, action=action))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError(str(e)) from e
