from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from repairdesk.api.deps import get_current_user_id
from repairdesk.db import get_db
from repairdesk.schemas.transaction_schema import (
    TransactionCreate,
    TransactionItemCreate,
    TransactionItemOut,
    TransactionOut,
)
from repairdesk.services.exceptions import InsufficientStockError, NotFoundError
from repairdesk.services.transaction_service import TransactionService

router = APIRouter(tags=["transactions"])


@router.post("/api/transactions", response_model=TransactionOut, summary="createTransaction")
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return TransactionService(db).create(created_by=user_id, **payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/transactions", response_model=List[TransactionOut], summary="getTransactions")
def list_transactions(db: Session = Depends(get_db)):
    return TransactionService(db).list()


@router.get(
    "/api/transactions/{transaction_id}",
    response_model=Optional[TransactionOut],
    summary="getTransaction",
)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    return TransactionService(db).get(transaction_id)


@router.post("/api/transaction-items", response_model=TransactionItemOut, summary="createTransactionItem")
def create_transaction_item(payload: TransactionItemCreate, db: Session = Depends(get_db)):
    """
    payload: { "transaction_id": 1, "product_id": 4, "quantity": 2, "unit_price": 19.99 }
    Deducts stock; rejected with 400 when quantity exceeds what is on hand.
    """
    svc = TransactionService(db)
    try:
        return svc.add_item(**payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InsufficientStockError as e:
        raise HTTPException(status_code=400, detail=str(e))
