# backend/models/product.py

from sqlalchemy import Column, Integer, Numeric, String, Text
from . import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    description = Column(Text)
    price = Column(Numeric(10, 2, asdecimal=False))
    quantity = Column(Integer)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "quantity": self.quantity,
        }
