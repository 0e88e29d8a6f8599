from fastapi import APIRouter

from chelto.cities import CITIES

router = APIRouter(tags=["cities"])


@router.get("/cities")
def list_cities():
    return [
        {"name": c.name, "isLaunching": c.is_launching, "launchDate": c.launch_date}
        for c in CITIES
    ]
