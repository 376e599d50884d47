"""
Publisher Model

Represents a publishing house. Publishers are created and deleted by the
API but never updated.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from book_catalog.database import Base


class Publisher(Base):
    """
    Publisher model.

    Table: publisher

    Example:
        publisher = Publisher(
            name="Acme",
            address="1 Rd",
            contact="a@a.com",
        )
        db.add(publisher)
        db.commit()
    """

    __tablename__ = "publisher"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Publisher name"
    )

    address: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Postal address"
    )

    contact: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Contact e-mail or phone"
    )

    def __repr__(self) -> str:
        return f"Publisher(id={self.id}, name='{self.name}')"
