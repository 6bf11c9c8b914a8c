# backend/api/products.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.log import get_logger
from backend.database import get_db
from backend.repositories import product as product_repo


router = APIRouter(prefix="/api/products")
logger = get_logger(__name__)


# -------------------------------
# Request Schemas
# -------------------------------

class ProductRequest(BaseModel):
    """
    Full product payload, used for both creation and replacement.
    """
    name: str
    description: str
    price: float
    quantity: int


# -------------------------------
# Product Endpoints
# -------------------------------

@router.get("")
def list_products(db: Session = Depends(get_db)):
    try:
        products = product_repo.list_products(db)
    except SQLAlchemyError as e:
        logger.error("products_fetch_failed", error=str(e))
        return PlainTextResponse("Error fetching products", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return [product.to_dict() for product in products]


@router.post("", response_class=PlainTextResponse)
def add_product(req: ProductRequest, db: Session = Depends(get_db)):
    try:
        product_repo.create_product(db, req.name, req.description, req.price, req.quantity)
    except SQLAlchemyError as e:
        logger.error("product_add_failed", name=req.name, error=str(e))
        return PlainTextResponse("Error adding product", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return "Product added successfully!"


@router.put("/{product_id}", response_class=PlainTextResponse)
def update_product(product_id: int, req: ProductRequest, db: Session = Depends(get_db)):
    """
    Replaces every field of a product. An unknown id is a no-op and still reports success.
    """
    try:
        product_repo.update_product(db, product_id, req.name, req.description, req.price, req.quantity)
    except SQLAlchemyError as e:
        logger.error("product_update_failed", product_id=product_id, error=str(e))
        return PlainTextResponse("Error updating product", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return "Product updated successfully!"


@router.delete("/{product_id}", response_class=PlainTextResponse)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    try:
        product_repo.delete_product(db, product_id)
    except SQLAlchemyError as e:
        logger.error("product_delete_failed", product_id=product_id, error=str(e))
        return PlainTextResponse("Error deleting product", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return "Product deleted successfully!"
