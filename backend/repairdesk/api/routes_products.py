from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from repairdesk.db import get_db
from repairdesk.schemas.product_schema import ProductCreate, ProductOut, ProductUpdate
from repairdesk.services.exceptions import NotFoundError
from repairdesk.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post("", response_model=ProductOut, summary="createProduct")
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return ProductService(db).create(**payload.model_dump())


@router.get("", response_model=List[ProductOut], summary="getProducts")
def list_products(db: Session = Depends(get_db)):
    return ProductService(db).list()


# declared before /{product_id} so "low-stock" is not parsed as an id
@router.get("/low-stock", response_model=List[ProductOut], summary="getLowStockProducts")
def low_stock_products(db: Session = Depends(get_db)):
    return ProductService(db).low_stock()


@router.get("/{product_id}", response_model=Optional[ProductOut], summary="getProduct")
def get_product(product_id: int, db: Session = Depends(get_db)):
    return ProductService(db).get(product_id)


@router.patch("/{product_id}", response_model=ProductOut, summary="updateProduct")
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    try:
        return ProductService(db).update(product_id, payload.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
