from __future__ import annotations

import html
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.orm import Session

from chelto.cities import is_known_city
from chelto.core.database import get_db
from chelto.services import registration_service
from chelto.services.exceptions import (
    DuplicateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from chelto.services.monitor_service import notify_monitor
from chelto.services.rate_limit_service import is_rate_limited, record_action
from chelto.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registrations"])


def _stripped(v) -> str:
    v = (v or "").strip() if isinstance(v, str) else v
    if not v:
        raise ValueError("must not be blank")
    return v


class RegistrationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., max_length=120)
    email: str = Field(..., max_length=191)
    phone_number: str = Field(..., alias="phoneNumber", max_length=32)
    city: str = Field(..., max_length=64)

    @field_validator("name", "email", "phone_number", "city", mode="before")
    @classmethod
    def strip_blank(cls, v):
        return _stripped(v)

    @field_validator("city")
    @classmethod
    def city_must_be_known(cls, v: str) -> str:
        if not is_known_city(v):
            raise ValueError("unknown city")
        return v


class RetrieveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., max_length=191)
    phone_number: str = Field(..., alias="phoneNumber", max_length=32)

    @field_validator("email", "phone_number", mode="before")
    @classmethod
    def strip_blank(cls, v):
        return _stripped(v)


def _client_ip(request: Request) -> str:
    xf = request.headers.get("x-forwarded-for")
    if xf:
        return xf.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _rate_limit_or_429(db: Session, request: Request, action: str) -> None:
    ip = _client_ip(request)
    if is_rate_limited(db, ip, action):
        raise HTTPException(status_code=429, detail="Too many requests")
    record_action(db, ip, action)


@router.post("/registrations")
def register(
    data: RegistrationRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Register for the launch and receive a promocode.

    Rate-limited by IP.
    """
    try:
        _rate_limit_or_429(db, request, "registration_submit")
        result = registration_service.register(
            RecordStore(db),
            name=data.name,
            email=data.email,
            phone_number=data.phone_number,
            city=data.city,
        )
    except DuplicateError as e:
        return JSONResponse(
            status_code=409,
            content={"success": False, "field": e.field, "message": str(e)},
        )
    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"success": False, "field": e.field, "message": str(e)},
        )
    except PersistenceError:
        logger.exception("Error saving registration")
        raise HTTPException(status_code=503, detail="Registration failed. Please try again.")

    notify_monitor(
        "🟢 <b>New Launch Registration</b>\n\n"
        f"👤 Name: {html.escape(data.name)}\n"
        f"📧 Email: {html.escape(data.email)}\n"
        f"📍 City: {html.escape(result.city)}\n"
        f"🎁 Code: {result.promocode}"
    )

    return {
        "success": True,
        "promocode": result.promocode,
        "promocodeAmount": result.promocode_amount,
        "city": result.city,
    }


@router.post("/promocode/retrieve")
def retrieve_promocode(
    data: RetrieveRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    try:
        _rate_limit_or_429(db, request, "promocode_retrieve")
        promocode = registration_service.retrieve(
            RecordStore(db),
            email=data.email,
            phone_number=data.phone_number,
        )
    except NotFoundError as e:
        return JSONResponse(status_code=404, content={"success": False, "message": str(e)})
    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"success": False, "field": e.field, "message": str(e)},
        )
    except PersistenceError:
        logger.exception("Error retrieving promocode")
        raise HTTPException(status_code=503, detail="Failed to retrieve promocode. Please try again.")

    return {"success": True, "promocode": promocode}
