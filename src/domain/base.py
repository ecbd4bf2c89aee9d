from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for persisted domain entities"""
    pass
