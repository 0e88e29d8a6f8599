from fastapi import Header, HTTPException

from chelto.core import config


def admin_auth(x_admin_key: str = Header(None)):
    if not config.ADMIN_API_KEY or not x_admin_key or x_admin_key != config.ADMIN_API_KEY:
        raise HTTPException(status_code=401, detail="Unauthorized")
