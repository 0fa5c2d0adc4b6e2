"""Products endpoints"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from motor.motor_asyncio import AsyncIOMotorDatabase
from datetime import datetime
from typing import List, Optional
import logging
import re

from app.database import get_database
from app.api.deps import require_vendor, require_admin_key
from app.models.product import Product
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)
from app.schemas.common import SuccessResponse
from app.utils.sample_products import SAMPLE_PRODUCTS
from app.utils.validators import parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()


# Helper functions

def product_to_response(product: dict) -> ProductResponse:
    """Convert database product document to ProductResponse"""
    return ProductResponse(
        id=str(product["_id"]),
        name=product["name"],
        description=product.get("description", ""),
        price=product["price"],
        category=product.get("category", ""),
        image=product.get("image", ""),
        stock=product.get("stock", 0),
        sizes=product.get("sizes", []),
        colors=product.get("colors", []),
        vendor=str(product["vendor"]) if product.get("vendor") else None,
        vendor_name=product.get("vendor_name"),
        created_at=product.get("created_at", datetime.utcnow()),
        updated_at=product.get("updated_at", datetime.utcnow()),
    )


async def insert_vendor_product(
    product_data: ProductCreate,
    vendor: dict,
    db: AsyncIOMotorDatabase
) -> dict:
    """Insert a product owned by the given vendor and return the stored document"""
    product = Product(
        **product_data.model_dump(),
        vendor=vendor["_id"],
        vendor_name=vendor.get("name"),
    )
    result = await db.products.insert_one(product.to_document())
    logger.info(f"Vendor {vendor['_id']} created product {result.inserted_id}")
    return await db.products.find_one({"_id": result.inserted_id})


async def get_manageable_product(
    product_id: str,
    vendor: dict,
    db: AsyncIOMotorDatabase,
    allow_unowned: bool = False
) -> dict:
    """
    Fetch a product the vendor is allowed to modify.

    Products owned by another vendor are reported as missing so their
    existence is not disclosed. Unowned products (e.g. the seeded catalog)
    are manageable only when allow_unowned is set.

    Raises:
        HTTPException: 400 for a malformed id, 404 if missing or not manageable
    """
    oid = parse_object_id(product_id, "product ID")
    product = await db.products.find_one({"_id": oid})

    owner = product.get("vendor") if product else None
    if not product or (owner is None and not allow_unowned) or (owner is not None and owner != vendor["_id"]):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found or access denied"
        )

    return product


async def apply_product_update(
    product: dict,
    product_data: ProductUpdate,
    db: AsyncIOMotorDatabase
) -> dict:
    """Apply a partial update and return the updated document"""
    update_dict = product_data.model_dump(exclude_unset=True, exclude_none=True)

    if not update_dict:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update"
        )

    update_dict["updated_at"] = datetime.utcnow()

    await db.products.update_one(
        {"_id": product["_id"]},
        {"$set": update_dict}
    )
    logger.info(f"Updated product {product['_id']}: {sorted(update_dict)}")

    return await db.products.find_one({"_id": product["_id"]})


async def remove_product(product: dict, db: AsyncIOMotorDatabase):
    """Hard-delete a product; existing orders keep their captured line data"""
    await db.products.delete_one({"_id": product["_id"]})
    logger.info(f"Deleted product {product['_id']}")


# Catalog endpoints

@router.get("/products", response_model=List[ProductResponse])
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    category: Optional[str] = None,
    search: Optional[str] = None,
    vendor: Optional[str] = None,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    List products with optional filtering and pagination.
    Public endpoint - no authentication required.
    """
    query = {}

    if category:
        query["category"] = category

    if vendor:
        query["vendor"] = parse_object_id(vendor, "vendor ID")

    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
        ]

    skip = (page - 1) * limit

    cursor = db.products.find(query).sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit)
    products = await cursor.to_list(length=limit)

    return [product_to_response(p) for p in products]


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Get a single product by ID.
    Public endpoint - no authentication required.
    """
    oid = parse_object_id(product_id, "product ID")
    product = await db.products.find_one({"_id": oid})

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    return product_to_response(product)


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    db: AsyncIOMotorDatabase = Depends(get_database),
    current_user: dict = Depends(require_vendor)
):
    """
    Create a new product owned by the calling vendor.
    Requires vendor role.
    """
    created_product = await insert_vendor_product(product_data, current_user, db)
    return product_to_response(created_product)


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    product_data: ProductUpdate,
    db: AsyncIOMotorDatabase = Depends(get_database),
    current_user: dict = Depends(require_vendor)
):
    """
    Update a product.
    Requires vendor role; products owned by another vendor are off limits.
    """
    product = await get_manageable_product(product_id, current_user, db, allow_unowned=True)
    updated_product = await apply_product_update(product, product_data, db)
    return product_to_response(updated_product)


@router.delete("/products/{product_id}", response_model=SuccessResponse)
async def delete_product(
    product_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
    current_user: dict = Depends(require_vendor)
):
    """
    Delete a product.
    Requires vendor role; products owned by another vendor are off limits.
    """
    product = await get_manageable_product(product_id, current_user, db, allow_unowned=True)
    await remove_product(product, db)

    return SuccessResponse(
        success=True,
        message="Product deleted successfully"
    )


@router.post(
    "/seed-products",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin_key)],
)
async def seed_products(
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Replace the catalog with the sample products.
    Requires the X-Admin-Key header.
    """
    documents = [Product(**sample).to_document() for sample in SAMPLE_PRODUCTS]

    deleted = await db.products.delete_many({})
    await db.products.insert_many(documents)

    logger.info(
        f"Seeded {len(documents)} sample products "
        f"(removed {deleted.deleted_count} existing)"
    )

    return SuccessResponse(
        success=True,
        message="Sample products seeded successfully",
        data={"inserted": len(documents), "removed": deleted.deleted_count}
    )
