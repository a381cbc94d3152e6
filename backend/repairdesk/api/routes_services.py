from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from repairdesk.db import get_db
from repairdesk.schemas.service_schema import ServiceCreate, ServiceOut, ServiceUpdate
from repairdesk.services.exceptions import NotFoundError
from repairdesk.services.repair_service import RepairService

router = APIRouter(prefix="/api/services", tags=["services"])


@router.post("", response_model=ServiceOut, summary="createService")
def create_service(payload: ServiceCreate, db: Session = Depends(get_db)):
    try:
        return RepairService(db).create(**payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=List[ServiceOut], summary="getServices")
def list_services(db: Session = Depends(get_db)):
    return RepairService(db).list()


@router.get("/{service_id}", response_model=Optional[ServiceOut], summary="getService")
def get_service(service_id: int, db: Session = Depends(get_db)):
    return RepairService(db).get(service_id)


@router.patch("/{service_id}", response_model=ServiceOut, summary="updateService")
def update_service(service_id: int, payload: ServiceUpdate, db: Session = Depends(get_db)):
    try:
        return RepairService(db).update(service_id, payload.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
