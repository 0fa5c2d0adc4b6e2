"""Orders endpoints"""

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from datetime import datetime
from bson import ObjectId
from typing import List, Optional
import logging

from app.database import get_database
from app.api.deps import get_current_user
from app.models.order import (
    CUSTOMER_CANCELLABLE,
    Order,
    OrderItem,
    OrderStatus,
)
from app.schemas.order import (
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderItemResponse,
    OrderCustomer,
)
from app.utils.validators import parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()

# Allowed gap between a client-sent total and the server-computed one
TOTAL_TOLERANCE = 0.01


# Helper functions

def merge_order_lines(items_input: list) -> dict:
    """
    Collapse repeated product lines into one quantity per product.
    Returns {ObjectId: quantity} in first-seen order.
    """
    quantities = {}
    for item in items_input:
        product_id = parse_object_id(item.product_id, f"product ID: {item.product_id}")
        quantities[product_id] = quantities.get(product_id, 0) + item.quantity
    return quantities


async def build_order_items(quantities: dict, db: AsyncIOMotorDatabase) -> tuple:
    """
    Price order lines from the stored products.
    Returns (order_items, total)
    """
    order_items = []
    total = 0.0

    for product_id, quantity in quantities.items():
        product = await db.products.find_one({"_id": product_id})

        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Product not found: {product_id}"
            )

        item = OrderItem(
            product_id=product["_id"],
            name=product["name"],
            image=product.get("image"),
            quantity=quantity,
            price=product["price"],
        )
        order_items.append(item)
        total += item.subtotal

    return order_items, round(total, 2)


async def restock_items(items: list, db: AsyncIOMotorDatabase):
    """Return ordered quantities to stock"""
    for item in items:
        await db.products.update_one(
            {"_id": item["product_id"]},
            {"$inc": {"stock": item["quantity"]}}
        )


async def take_stock(order_items: List[OrderItem], db: AsyncIOMotorDatabase):
    """
    Decrement stock for every line, all or nothing.

    Each decrement is conditional on sufficient stock, so concurrent orders
    cannot drive stock negative. On the first failure, whether short stock
    or a database error, the decrements already applied are rolled back.
    """
    taken = []

    for item in order_items:
        try:
            product = await db.products.find_one_and_update(
                {"_id": item.product_id, "stock": {"$gte": item.quantity}},
                {"$inc": {"stock": -item.quantity}},
                return_document=ReturnDocument.AFTER,
            )
        except Exception:
            logger.exception(f"Stock update failed for product {item.product_id}, returning stock")
            await restock_items(taken, db)
            raise

        if product is None:
            await restock_items(taken, db)
            current = await db.products.find_one({"_id": item.product_id}, {"stock": 1})
            available = current.get("stock", 0) if current else 0
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Insufficient stock for product '{item.name}'. Available: {available}"
            )

        taken.append({"product_id": item.product_id, "quantity": item.quantity})


async def change_order_status(
    order: dict,
    new_status: OrderStatus,
    db: AsyncIOMotorDatabase
) -> dict:
    """
    Move an order to a new status and return the updated document.
    Cancelled is terminal; cancelling returns the order's quantities to stock.
    """
    current_status = order.get("status", OrderStatus.PENDING.value)

    if current_status == OrderStatus.CANCELLED.value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot change status of a cancelled order"
        )

    # Conditional on the status we read, so a concurrent cancel restocks once
    updated_order = await db.orders.find_one_and_update(
        {"_id": order["_id"], "status": current_status},
        {"$set": {"status": new_status.value, "updated_at": datetime.utcnow()}},
        return_document=ReturnDocument.AFTER,
    )

    if updated_order is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Order was modified concurrently, please retry"
        )

    if new_status == OrderStatus.CANCELLED:
        await restock_items(order.get("items", []), db)

    logger.info(f"Order {order['_id']} status {current_status} -> {new_status.value}")

    return updated_order


def order_to_response(
    order: dict,
    products: Optional[dict] = None,
    customer: Optional[dict] = None
) -> OrderResponse:
    """
    Convert database order document to OrderResponse.
    Current product data (when given) fills in image and category.
    """
    products = products or {}
    items = []

    for item in order.get("items", []):
        product = products.get(item["product_id"], {})
        items.append(OrderItemResponse(
            product_id=str(item["product_id"]),
            name=item.get("name") or product.get("name", ""),
            image=product.get("image", item.get("image")),
            category=product.get("category"),
            quantity=item["quantity"],
            price=item["price"],
            subtotal=round(item["price"] * item["quantity"], 2),
        ))

    return OrderResponse(
        id=str(order["_id"]),
        user_id=str(order["user_id"]),
        customer=OrderCustomer(
            id=str(customer["_id"]),
            name=customer.get("name"),
            email=customer.get("email"),
        ) if customer else None,
        items=items,
        total=order["total"],
        shipping_info=order["shipping_info"],
        payment_method=order["payment_method"],
        status=order.get("status", OrderStatus.PENDING.value),
        created_at=order.get("created_at", datetime.utcnow()),
        updated_at=order.get("updated_at", order.get("created_at", datetime.utcnow())),
    )


async def populate_orders(
    orders: list,
    db: AsyncIOMotorDatabase,
    include_customer: bool = False
) -> List[OrderResponse]:
    """Attach product details (and optionally customer name/email) to orders"""
    product_ids = {item["product_id"] for order in orders for item in order.get("items", [])}
    products = {}
    if product_ids:
        cursor = db.products.find(
            {"_id": {"$in": list(product_ids)}},
            {"name": 1, "image": 1, "category": 1}
        )
        products = {p["_id"]: p for p in await cursor.to_list(length=len(product_ids))}

    customers = {}
    if include_customer:
        user_ids = {order["user_id"] for order in orders}
        if user_ids:
            cursor = db.users.find(
                {"_id": {"$in": list(user_ids)}},
                {"name": 1, "email": 1}
            )
            customers = {u["_id"]: u for u in await cursor.to_list(length=len(user_ids))}

    return [
        order_to_response(
            order,
            products,
            customers.get(order["user_id"], {"_id": order["user_id"]}) if include_customer else None,
        )
        for order in orders
    ]


# Order endpoints

@router.get("/orders", response_model=List[OrderResponse])
async def list_my_orders(
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Get the current user's orders, newest first.
    """
    cursor = db.orders.find({"user_id": current_user["_id"]}).sort([("created_at", -1), ("_id", -1)])
    orders = await cursor.to_list(length=None)

    return await populate_orders(orders, db)


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Place an order.
    Prices and total are computed from the stored products and stock is
    decremented; a client-sent total must match the computed one.
    """
    quantities = merge_order_lines(order_data.items)
    order_items, total = await build_order_items(quantities, db)

    if order_data.total is not None and abs(order_data.total - total) > TOTAL_TOLERANCE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Order total mismatch. Expected: {total:.2f}"
        )

    order = Order(
        user_id=current_user["_id"],
        items=order_items,
        total=total,
        shipping_info=order_data.shipping_info,
        payment_method=order_data.payment_method,
        status=order_data.payment_method.initial_status,
    )

    await take_stock(order_items, db)

    try:
        result = await db.orders.insert_one(order.to_document())
    except Exception:
        logger.exception("Failed to store order, returning stock")
        await restock_items(
            [{"product_id": item.product_id, "quantity": item.quantity} for item in order_items],
            db
        )
        raise

    logger.info(
        f"User {current_user['_id']} placed order {result.inserted_id} "
        f"({len(order_items)} lines, total {total:.2f})"
    )

    created_order = await db.orders.find_one({"_id": result.inserted_id})
    responses = await populate_orders([created_order], db)
    return responses[0]


async def get_own_order(order_id: str, user: dict, db: AsyncIOMotorDatabase) -> dict:
    """Fetch an order belonging to the user, 404 otherwise"""
    oid: ObjectId = parse_object_id(order_id, "order ID")
    order = await db.orders.find_one({"_id": oid, "user_id": user["_id"]})

    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )

    return order


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Get one of the current user's orders.
    """
    order = await get_own_order(order_id, current_user, db)
    responses = await populate_orders([order], db)
    return responses[0]


@router.put("/orders/{order_id}", response_model=OrderResponse)
async def update_my_order(
    order_id: str,
    status_update: OrderStatusUpdate,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Update one of the current user's orders.
    Customers may only cancel, and only before the order ships.
    """
    order = await get_own_order(order_id, current_user, db)

    if status_update.status != OrderStatus.CANCELLED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Customers can only cancel orders"
        )

    if order.get("status") not in {s.value for s in CUSTOMER_CANCELLABLE}:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Order can no longer be cancelled (status: {order.get('status')})"
        )

    updated_order = await change_order_status(order, OrderStatus.CANCELLED, db)
    responses = await populate_orders([updated_order], db)
    return responses[0]
