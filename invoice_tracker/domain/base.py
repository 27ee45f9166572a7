"""Base class for domain entities"""

from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """
    Common base for domain entities

    Entities are SQLModel models without a table binding; the store keeps
    them in process memory.
    """
