from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from repairdesk.db import get_db
from repairdesk.schemas.user_schema import UserCreate, UserOut
from repairdesk.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserOut, summary="createUser")
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    try:
        return UserService(db).create(**payload.model_dump())
    except IntegrityError as e:
        # raw constraint message from the datastore
        raise HTTPException(status_code=409, detail=str(e.orig))


@router.get("", response_model=List[UserOut], summary="getUsers")
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list()


@router.get("/technicians", response_model=List[UserOut], summary="getTechnicians")
def list_technicians(db: Session = Depends(get_db)):
    return UserService(db).technicians()
