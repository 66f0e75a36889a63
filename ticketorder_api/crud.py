from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ticketorder_api import models, schemas

# ===============================
# Ticket Order Queries
# ===============================

def _ticket_order_view_query(db: Session):
    return (
        db.query(
            models.TicketOrder.id,
            models.TicketOrder.event_id,
            models.TicketOrder.customer_id,
            models.Event.name.label("event_name"),
            models.Customer.full_name.label("customer_name"),
            models.TicketOrder.order_date,
            models.TicketOrder.ticket_count,
        )
        .join(models.Event, models.TicketOrder.event_id == models.Event.id)
        .join(models.Customer, models.TicketOrder.customer_id == models.Customer.id)
    )

def get_ticket_orders(db: Session) -> List[schemas.TicketOrderView]:
    rows = _ticket_order_view_query(db).order_by(models.TicketOrder.id).all()
    return [schemas.TicketOrderView.model_validate(row) for row in rows]

def get_ticket_order(db: Session, order_id: int) -> Optional[schemas.TicketOrderView]:
    row = _ticket_order_view_query(db).filter(models.TicketOrder.id == order_id).first()
    if row is None:
        return None
    return schemas.TicketOrderView.model_validate(row)

def search_ticket_orders(db: Session, event_name: str) -> List[schemas.TicketOrderView]:
    if not event_name:
        raise ValueError("event_name must be a non-empty string")
    rows = (
        _ticket_order_view_query(db)
        .filter(models.Event.name.contains(event_name, autoescape=True))
        .order_by(models.TicketOrder.id)
        .all()
    )
    return [schemas.TicketOrderView.model_validate(row) for row in rows]

# ===============================
# Ticket Order Commands
# ===============================

def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise

def create_ticket_order(db: Session, ticket_order: schemas.TicketOrderCreate):
    # ids always come from the database sequence
    data = ticket_order.model_dump(exclude_none=True, exclude={"id"})
    db_order = models.TicketOrder(**data)
    db.add(db_order)
    _commit(db)
    db.refresh(db_order)
    return db_order

def replace_ticket_order(db: Session, order_id: int, ticket_order: schemas.TicketOrderReplace):
    db_order = db.query(models.TicketOrder).filter(models.TicketOrder.id == order_id).first()
    if db_order:
        for key, value in ticket_order.model_dump(exclude={"id"}).items():
            setattr(db_order, key, value)
        _commit(db)
        db.refresh(db_order)
    return db_order

def delete_ticket_order(db: Session, order_id: int) -> Optional[schemas.TicketOrder]:
    db_order = db.query(models.TicketOrder).filter(models.TicketOrder.id == order_id).first()
    if db_order is None:
        return None
    snapshot = schemas.TicketOrder.model_validate(db_order)
    db.delete(db_order)
    db.commit()
    return snapshot

# ===============================
# Lookups
# ===============================

def get_customers(db: Session):
    return db.query(models.Customer).order_by(models.Customer.id).all()

def get_events_window(db: Session, first_limit: int = 5000, last_limit: int = 100):
    """First events by id ascending, then last events by id descending.

    Both windows are returned whole, so events inside the overlap appear twice.
    """
    first_records = db.query(models.Event).order_by(models.Event.id).limit(first_limit).all()
    last_records = db.query(models.Event).order_by(models.Event.id.desc()).limit(last_limit).all()
    return first_records + last_records
