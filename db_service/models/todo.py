from sqlalchemy import Boolean, Column, Integer, Text

from db_service.base import Base


class TodoItem(Base):
    __tablename__ = "todos"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    is_complete = Column("isComplete", Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"TodoItem(id={self.id!r}, text={self.text!r}, is_complete={self.is_complete!r})"
