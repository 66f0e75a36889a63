"""Demo events and customers.

The API has no endpoints for creating events or customers, so a fresh
database is filled from here. Safe to run repeatedly: only missing ids are
inserted.

    python -m ticketorder_api.seed
"""
import logging

from sqlalchemy.orm import Session

from ticketorder_api import models
from ticketorder_api.database import Base, SessionLocal, engine

logger = logging.getLogger(__name__)

EVENTS = [
    (1, "Concert"),
    (2, "Theater"),
    (3, "Jazz Festival"),
    (4, "City Marathon"),
    (5, "Art Exhibition"),
]

CUSTOMERS = [
    (1, "John Doe"),
    (2, "Jane Smith"),
    (3, "Alex Johnson"),
]


def ensure_event(db: Session, event_id: int, name: str) -> bool:
    if db.get(models.Event, event_id):
        return False
    db.add(models.Event(id=event_id, name=name))
    return True


def ensure_customer(db: Session, customer_id: int, full_name: str) -> bool:
    if db.get(models.Customer, customer_id):
        return False
    db.add(models.Customer(id=customer_id, full_name=full_name))
    return True


def run(db=None):
    owns_session = db is None
    if owns_session:
        db = SessionLocal()
    try:
        added_events = sum(ensure_event(db, event_id, name) for event_id, name in EVENTS)
        added_customers = sum(ensure_customer(db, customer_id, name) for customer_id, name in CUSTOMERS)
        db.commit()
        logger.info(f"Seeded {added_events} events and {added_customers} customers.")
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    run()
