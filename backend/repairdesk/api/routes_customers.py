from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from repairdesk.db import get_db
from repairdesk.schemas.customer_schema import CustomerCreate, CustomerOut, CustomerUpdate
from repairdesk.schemas.report_schema import CustomerHistory
from repairdesk.services.customer_service import CustomerService
from repairdesk.services.exceptions import NotFoundError

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.post("", response_model=CustomerOut, summary="createCustomer")
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    return CustomerService(db).create(**payload.model_dump())


@router.get("", response_model=List[CustomerOut], summary="getCustomers")
def list_customers(db: Session = Depends(get_db)):
    return CustomerService(db).list()


@router.get("/{customer_id}", response_model=Optional[CustomerOut], summary="getCustomer")
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    # unknown id -> null body, not 404
    return CustomerService(db).get(customer_id)


@router.patch("/{customer_id}", response_model=CustomerOut, summary="updateCustomer")
def update_customer(customer_id: int, payload: CustomerUpdate, db: Session = Depends(get_db)):
    try:
        return CustomerService(db).update(customer_id, payload.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{customer_id}/history", response_model=CustomerHistory, summary="getCustomerHistory")
def customer_history(customer_id: int, db: Session = Depends(get_db)):
    return CustomerService(db).history(customer_id)
