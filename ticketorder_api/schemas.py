from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

# JSON field names follow the front end (orderID, eventName, ...).
# Python attribute names match the ORM columns so rows validate directly.

# ===============================
# Ticket Order Schemas
# ===============================

class TicketOrderBase(BaseModel):
    event_id: int = Field(alias="eventID")
    customer_id: int = Field(alias="customerID")
    ticket_count: int = Field(alias="ticketCount")

    class Config:
        populate_by_name = True

class TicketOrderCreate(TicketOrderBase):
    # ignored on insert; the database assigns the id
    id: Optional[int] = Field(default=None, alias="orderID")
    order_date: Optional[datetime] = Field(default=None, alias="orderDate")

class TicketOrderReplace(TicketOrderBase):
    """Full replacement; every mutable field must be present."""
    # missing id is 0 and never matches a path id
    id: int = Field(default=0, alias="orderID")
    order_date: datetime = Field(alias="orderDate")

class TicketOrder(TicketOrderBase):
    id: int = Field(alias="orderID")
    order_date: datetime = Field(alias="orderDate")

    class Config:
        from_attributes = True
        populate_by_name = True

class TicketOrderView(BaseModel):
    """Order flattened with its event and customer names."""
    id: int = Field(alias="orderID")
    event_id: int = Field(alias="eventID")
    customer_id: int = Field(alias="customerID")
    event_name: str = Field(alias="eventName")
    customer_name: str = Field(alias="customerName")
    order_date: datetime = Field(alias="orderDate")
    ticket_count: int = Field(alias="ticketCount")

    class Config:
        from_attributes = True
        populate_by_name = True

# ===============================
# Lookup Schemas
# ===============================

class Customer(BaseModel):
    id: int = Field(alias="customerID")
    full_name: str = Field(alias="fullName")

    class Config:
        from_attributes = True
        populate_by_name = True

class Event(BaseModel):
    id: int = Field(alias="eventID")
    name: str = Field(alias="eventName")

    class Config:
        from_attributes = True
        populate_by_name = True
