# backend/repositories/product.py

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.models.product import Product


def list_products(db: Session) -> list[Product]:
    return db.query(Product).order_by(Product.id).all()


def create_product(db: Session, name: str, description: str, price: float, quantity: int) -> None:
    product = Product(name=name, description=description, price=price, quantity=quantity)
    try:
        db.add(product)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def update_product(db: Session, product_id: int, name: str, description: str, price: float, quantity: int) -> int:
    """
    Overwrites every column of one product. Returns the matched row count.
    """
    values = {
        Product.name: name,
        Product.description: description,
        Product.price: price,
        Product.quantity: quantity,
    }
    try:
        count = db.query(Product).filter(Product.id == product_id).update(values, synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return count


def delete_product(db: Session, product_id: int) -> int:
    try:
        count = db.query(Product).filter(Product.id == product_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return count
