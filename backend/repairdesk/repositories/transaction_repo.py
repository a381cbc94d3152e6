from datetime import datetime
from typing import List, Optional

from repairdesk.models.transaction import Transaction, TransactionItem
from sqlalchemy.orm import Session


class TransactionRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, transaction_id: int) -> Optional[Transaction]:
        return self.db.get(Transaction, transaction_id)

    def list(self, customer_id: int = None) -> List[Transaction]:
        query = self.db.query(Transaction)
        if customer_id is not None:
            query = query.filter(Transaction.customer_id == customer_id)
        return query.order_by(Transaction.created_at.desc(), Transaction.id.desc()).all()

    def between(self, start: datetime, end: Optional[datetime] = None, inclusive_end: bool = True) -> List[Transaction]:
        query = self.db.query(Transaction).filter(Transaction.created_at >= start)
        if end is not None:
            if inclusive_end:
                query = query.filter(Transaction.created_at <= end)
            else:
                query = query.filter(Transaction.created_at < end)
        return query.all()

    def add(self, transaction: Transaction) -> Transaction:
        self.db.add(transaction)
        self.db.flush()
        return transaction

    def add_item(self, item: TransactionItem) -> TransactionItem:
        self.db.add(item)
        self.db.flush()
        return item
