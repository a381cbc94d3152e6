from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from repairdesk.api.deps import get_current_user_id
from repairdesk.db import get_db
from repairdesk.schemas.stock_schema import StockMovementCreate, StockMovementOut
from repairdesk.services.exceptions import NotFoundError
from repairdesk.services.inventory_service import InventoryService

router = APIRouter(prefix="/api/stock-movements", tags=["inventory"])


@router.post("", response_model=StockMovementOut, summary="createStockMovement")
def create_stock_movement(
    payload: StockMovementCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    payload: { "product_id": 3, "type": "out", "quantity": 2, "price_per_unit": null, "notes": "bench use" }
    Stock may go negative on "out".
    """
    svc = InventoryService(db)
    try:
        return svc.apply_stock_movement(created_by=user_id, **payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=List[StockMovementOut], summary="getStockMovements")
def list_stock_movements(db: Session = Depends(get_db)):
    return InventoryService(db).list_movements()


@router.get(
    "/product/{product_id}",
    response_model=List[StockMovementOut],
    summary="getStockMovementsByProduct",
)
def stock_movements_by_product(product_id: int, db: Session = Depends(get_db)):
    return InventoryService(db).list_movements(product_id=product_id)
