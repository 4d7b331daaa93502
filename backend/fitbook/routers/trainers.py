from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.catalogue import list_trainers
from ..core.db import get_db
from ..schemas.trainer import TrainerOut

router = APIRouter(prefix="/api/trainers", tags=["Trainers"])


@router.get("")
def trainers(db: Session = Depends(get_db)):
    return [TrainerOut.model_validate(t).model_dump(by_alias=True) for t in list_trainers(db)]
