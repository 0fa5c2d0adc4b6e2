"""Vendor endpoints: own product listings and order fulfilment"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List, Optional
import logging

from app.database import get_database
from app.api.deps import require_vendor
from app.api.v1.products import (
    product_to_response,
    insert_vendor_product,
    get_manageable_product,
    apply_product_update,
    remove_product,
)
from app.api.v1.orders import change_order_status, populate_orders
from app.models.order import OrderStatus
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from app.schemas.order import OrderResponse, OrderStatusUpdate
from app.schemas.common import SuccessResponse
from app.utils.validators import parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()


# Vendor product endpoints

@router.get("/products", response_model=List[ProductResponse])
async def list_vendor_products(
    current_user: dict = Depends(require_vendor),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    List the calling vendor's products, newest first.
    """
    cursor = db.products.find({"vendor": current_user["_id"]}).sort([("created_at", -1), ("_id", -1)])
    products = await cursor.to_list(length=None)

    return [product_to_response(p) for p in products]


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_vendor_product(
    product_data: ProductCreate,
    current_user: dict = Depends(require_vendor),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Create a product listed under the calling vendor.
    """
    created_product = await insert_vendor_product(product_data, current_user, db)
    return product_to_response(created_product)


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_vendor_product(
    product_id: str,
    product_data: ProductUpdate,
    current_user: dict = Depends(require_vendor),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Update one of the calling vendor's products.
    """
    product = await get_manageable_product(product_id, current_user, db)
    updated_product = await apply_product_update(product, product_data, db)
    return product_to_response(updated_product)


@router.delete("/products/{product_id}", response_model=SuccessResponse)
async def delete_vendor_product(
    product_id: str,
    current_user: dict = Depends(require_vendor),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Delete one of the calling vendor's products.
    """
    product = await get_manageable_product(product_id, current_user, db)
    await remove_product(product, db)

    return SuccessResponse(
        success=True,
        message="Product deleted successfully"
    )


# Vendor order endpoints

@router.get("/orders", response_model=List[OrderResponse])
async def list_vendor_orders(
    status_filter: Optional[OrderStatus] = Query(None, alias="status"),
    mine: bool = False,
    current_user: dict = Depends(require_vendor),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    List orders for fulfilment, newest first, with customer name and email.
    `mine=true` limits the list to orders containing this vendor's products.
    """
    query = {}

    if status_filter is not None:
        query["status"] = status_filter.value

    if mine:
        own_products = await db.products.find(
            {"vendor": current_user["_id"]}, {"_id": 1}
        ).to_list(length=None)
        query["items.product_id"] = {"$in": [p["_id"] for p in own_products]}

    cursor = db.orders.find(query).sort([("created_at", -1), ("_id", -1)])
    orders = await cursor.to_list(length=None)

    return await populate_orders(orders, db, include_customer=True)


@router.put("/orders/{order_id}", response_model=OrderResponse)
async def update_vendor_order(
    order_id: str,
    status_update: OrderStatusUpdate,
    current_user: dict = Depends(require_vendor),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Update an order's status.
    Cancelled orders cannot change; cancelling returns stock.
    """
    oid = parse_object_id(order_id, "order ID")
    order = await db.orders.find_one({"_id": oid})

    if not order:
        logger.warning(f"Vendor {current_user['_id']} tried to update missing order {oid}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )

    updated_order = await change_order_status(order, status_update.status, db)
    logger.info(f"Vendor {current_user['_id']} set order {oid} to {status_update.status.value}")

    responses = await populate_orders([updated_order], db, include_customer=True)
    return responses[0]
