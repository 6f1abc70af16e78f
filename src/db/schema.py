"""Database tables / schema"""

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "game"
    name: Mapped[str] = mapped_column(primary_key=True)
    publisher: Mapped[str]
    rating: Mapped[str]


class DBShoe(Base):
    __tablename__ = "shoes"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str]
    color: Mapped[str]
    brand: Mapped[str]


class DBUcsbBuilding(Base):
    __tablename__ = "ucsbbuildings"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str]
    description: Mapped[str]
    architecture: Mapped[str]
    location: Mapped[str]
