"""Base class for persisted domain entities"""

from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Common ancestor of every table entity so they share one metadata"""

    pass
