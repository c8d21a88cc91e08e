from fastapi import APIRouter

from ..roster import get_roster
from ..schemas import Doctor

router = APIRouter()


@router.get("/doctors", response_model=list[Doctor])
def list_doctors() -> list[Doctor]:
    return list(get_roster())
