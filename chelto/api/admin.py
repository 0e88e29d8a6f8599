from __future__ import annotations

import csv
from io import StringIO

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from chelto.core.database import get_db
from chelto.middleware.admin_auth import admin_auth
from chelto.services.record_store import RecordStore

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(admin_auth)])


@router.get("/registrations/export")
def export_registrations(db: Session = Depends(get_db)):
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(
        ["Name", "Email", "Phone", "City", "Promocode", "Amount", "Status", "Registered At"]
    )

    for r in RecordStore(db).list_all():
        writer.writerow([
            r.name,
            r.email,
            r.phone_number,
            r.city,
            r.promocode,
            r.promocode_amount,
            r.status,
            r.registered_at,
        ])

    output.seek(0)
    return StreamingResponse(
        output,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=launch-registrations.csv"},
    )
