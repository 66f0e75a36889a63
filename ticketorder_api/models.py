from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from ticketorder_api.database import Base

class Event(Base):
    __tablename__ = "events"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)

    ticket_orders = relationship("TicketOrder", back_populates="event")

class Customer(Base):
    __tablename__ = "customers"
    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)

    ticket_orders = relationship("TicketOrder", back_populates="customer")

class TicketOrder(Base):
    __tablename__ = "ticket_orders"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), index=True, nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), index=True, nullable=False)
    order_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    ticket_count = Column(Integer, nullable=False)  # positive expected, not enforced

    event = relationship("Event", back_populates="ticket_orders")
    customer = relationship("Customer", back_populates="ticket_orders")
