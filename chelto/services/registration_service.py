"""Registration and promocode retrieval workflow.

A registration is rejected when its email or its phone number is already on
file; the two checks run in that order and the first hit wins. The unique
indexes on the table back the checks up when two requests race.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime

from chelto.cities import is_known_city
from chelto.core import config
from chelto.models.registration import Registration
from chelto.services.exceptions import (
    DuplicateError,
    NotFoundError,
    PersistenceError,
    UniqueViolation,
    ValidationError,
)
from chelto.services.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class RegistrationResult:
    promocode: str
    promocode_amount: int
    city: str


def generate_promocode(prefix: str | None = None) -> str:
    prefix = config.PROMOCODE_PREFIX if prefix is None else prefix
    return f"{prefix}{random.randint(0, 9999):04d}"


def _require(field: str, value: str | None) -> str:
    v = (value or "").strip()
    if not v:
        raise ValidationError(field)
    return v


def _find_duplicate_field(store: RecordStore, email: str, phone_number: str) -> str | None:
    if store.query_equal("email", email):
        return "email"
    if store.query_equal("phone_number", phone_number):
        return "phone"
    return None


def register(
    store: RecordStore,
    name: str,
    email: str,
    phone_number: str,
    city: str,
) -> RegistrationResult:
    name = _require("name", name)
    email = _require("email", email)
    phone_number = _require("phone", phone_number)
    city = _require("city", city)
    if not is_known_city(city):
        raise ValidationError("city", f"Unknown city: {city}")

    duplicate = _find_duplicate_field(store, email, phone_number)
    if duplicate:
        raise DuplicateError(duplicate)

    attempts = max(1, config.PROMOCODE_MAX_ATTEMPTS)
    for attempt in range(attempts):
        promocode = generate_promocode()
        record = Registration(
            name=name,
            email=email,
            phone_number=phone_number,
            city=city,
            promocode=promocode,
            promocode_amount=config.PROMOCODE_AMOUNT,
            status=config.REGISTRATION_STATUS,
            registered_at=datetime.utcnow(),
        )
        try:
            store.insert(record)
        except UniqueViolation:
            # lost a race on email/phone, or drew a code already issued
            duplicate = _find_duplicate_field(store, email, phone_number)
            if duplicate:
                raise DuplicateError(duplicate)
            logger.info("Promocode collision on %s (attempt %d)", promocode, attempt + 1)
            continue

        logger.info("Registered %s in %s", email, city)
        return RegistrationResult(
            promocode=promocode,
            promocode_amount=config.PROMOCODE_AMOUNT,
            city=city,
        )

    raise PersistenceError(f"Could not issue a unique promocode after {attempts} attempts")


def retrieve(store: RecordStore, email: str, phone_number: str) -> str:
    email = _require("email", email)
    phone_number = _require("phone", phone_number)

    rows = store.query_equal_all({"email": email, "phone_number": phone_number})
    if not rows:
        raise NotFoundError()
    return rows[0].promocode
