import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ticketorder_api import crud, schemas
from ticketorder_api.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/ticketorders",
    tags=["ticketorders"],
)

INTEGRITY_ERROR_DETAIL = "Invalid event, customer or order ID."

def _not_found():
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket order not found")

# ===============================
# Lookup Endpoints
# ===============================
# Registered before "/{order_id}" so the fixed paths are not parsed as ids.

@router.get("/search", response_model=List[schemas.TicketOrderView])
def search_ticket_orders(eventName: Optional[str] = None, db: Session = Depends(get_db)):
    """Orders whose event name contains the given text."""
    if not eventName:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Event name is required.")
    return crud.search_ticket_orders(db, event_name=eventName)

@router.get("/customers", response_model=List[schemas.Customer])
def read_customers(db: Session = Depends(get_db)):
    """All customers, for the order form."""
    return crud.get_customers(db)

@router.get("/events", response_model=List[schemas.Event])
def read_events(
    firstLimit: int = Query(5000, ge=0),
    lastLimit: int = Query(100, ge=0),
    db: Session = Depends(get_db),
):
    """First `firstLimit` events ascending, then last `lastLimit` descending. Overlaps repeat."""
    return crud.get_events_window(db, first_limit=firstLimit, last_limit=lastLimit)

# ===============================
# Ticket Order Endpoints
# ===============================

@router.get("", response_model=List[schemas.TicketOrderView])
def read_ticket_orders(db: Session = Depends(get_db)):
    """All ticket orders with event and customer names."""
    return crud.get_ticket_orders(db)

@router.get("/{order_id}", response_model=schemas.TicketOrderView)
def read_ticket_order(order_id: int, db: Session = Depends(get_db)):
    """One ticket order by id."""
    ticket_order = crud.get_ticket_order(db, order_id=order_id)
    if ticket_order is None:
        raise _not_found()
    return ticket_order

@router.post("", response_model=schemas.TicketOrder, status_code=status.HTTP_201_CREATED)
def create_ticket_order(
    request: Request,
    response: Response,
    ticket_order: Optional[schemas.TicketOrderCreate] = Body(None),
    db: Session = Depends(get_db),
):
    """Create an order. The id is assigned by the database."""
    if ticket_order is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid data.")
    try:
        db_order = crud.create_ticket_order(db, ticket_order=ticket_order)
    except IntegrityError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INTEGRITY_ERROR_DETAIL)
    logger.info(f"Ticket order {db_order.id} created.")
    response.headers["Location"] = str(request.url_for("read_ticket_order", order_id=db_order.id))
    return db_order

@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def replace_ticket_order(
    order_id: int,
    ticket_order: Optional[schemas.TicketOrderReplace] = Body(None),
    db: Session = Depends(get_db),
):
    """Replace every field of an existing order. Body `orderID` must match the path."""
    if ticket_order is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid data.")
    if ticket_order.id != order_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Mismatched order ID.")
    try:
        db_order = crud.replace_ticket_order(db, order_id=order_id, ticket_order=ticket_order)
    except IntegrityError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INTEGRITY_ERROR_DETAIL)
    if db_order is None:
        raise _not_found()
    logger.info(f"Ticket order {order_id} replaced.")
    return

@router.delete("/{order_id}", response_model=schemas.TicketOrder)
def delete_ticket_order(order_id: int, db: Session = Depends(get_db)):
    """Delete an order and return what was removed."""
    snapshot = crud.delete_ticket_order(db, order_id=order_id)
    if snapshot is None:
        raise _not_found()
    logger.info(f"Ticket order {order_id} deleted.")
    return snapshot
