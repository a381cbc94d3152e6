from typing import Dict, List, Tuple

from repairdesk.models.stock_movement import StockMovement, StockMovementType
from sqlalchemy import func
from sqlalchemy.orm import Session


class StockMovementRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, movement: StockMovement) -> StockMovement:
        self.db.add(movement)
        self.db.flush()
        return movement

    def list(self, product_id: int = None) -> List[StockMovement]:
        query = self.db.query(StockMovement)
        if product_id is not None:
            query = query.filter(StockMovement.product_id == product_id)
        # newest first; id breaks ties between rows written in the same instant
        return query.order_by(
            StockMovement.created_at.desc(), StockMovement.id.desc()
        ).all()

    def totals_by_product(self) -> Dict[Tuple[int, StockMovementType], int]:
        """{(product_id, type): summed quantity} for every product that has movements"""
        rows = (
            self.db.query(
                StockMovement.product_id,
                StockMovement.type,
                func.coalesce(func.sum(StockMovement.quantity), 0),
            )
            .group_by(StockMovement.product_id, StockMovement.type)
            .all()
        )
        return {(pid, StockMovementType(t)): int(total) for pid, t, total in rows}
