"""
CatalogItem Entity Model

A product in the shop catalog. Price and stock are kept as display strings,
checkout happens elsewhere through ``link``.
"""

from sqlalchemy import Boolean, Integer, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from athenaeum.shared.models.base import Base, OwnedMixin, SluggedMixin, TimestampMixin


class CatalogItem(Base, OwnedMixin, SluggedMixin, TimestampMixin):
    """
    Catalog item model.

    Attributes:
        title: Product name (drives slug and meta title)
        desc: Product description (drives meta description)
        category: Free-text category label
        price: Display price, e.g. "Rp 120.000"
        stock: Display stock, e.g. "12"
        link: External purchase link
        is_available: Whether the item can currently be ordered
    """

    __tablename__ = "catalog_items"
    __namespace__ = "catalog"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    desc: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[str] = mapped_column(String(100), nullable=False)
    stock: Mapped[str] = mapped_column(String(100), nullable=False)
    link: Mapped[str] = mapped_column(Text, nullable=False)

    is_available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    def __repr__(self) -> str:
        return f"<CatalogItem(id={self.id}, slug={self.slug})>"
