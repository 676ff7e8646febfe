# catalog/api/v1/routers/products.py

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from catalog.api.deps import product_repo
from catalog.api.v1.schemas.catalog import (
    DeleteResultOut,
    ErrorOut,
    ProductCreatedOut,
    UpdateResultOut,
)
from catalog.core.errors import Created
from catalog.domain.repositories.product_repo import ProductRepo
from catalog.utils.encoding import to_jsonable

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.post(
    "/products",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductCreatedOut,
    responses={400: {"model": ErrorOut}},
)
async def create_product(
    doc: Dict[str, Any] = Body(..., description="Product document; `_id` is the caller-chosen key"),
    repo: ProductRepo = Depends(product_repo),
):
    outcome = await repo.insert(doc)
    if not isinstance(outcome, Created):
        # DuplicateKey and StoreError are both client-visible, message verbatim
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": outcome.message})
    logger.info(f"Created product id={outcome.id}")
    return {"ok": True, "id": to_jsonable(outcome.id)}


@router.get("/products/{product_id}", responses={404: {"model": ErrorOut}})
async def get_product(product_id: str, repo: ProductRepo = Depends(product_repo)):
    doc = await repo.get(product_id)
    logger.info(f"Request: get_product id={product_id} found={doc is not None}")
    if not doc:
        raise HTTPException(status_code=404, detail="Not found")
    return to_jsonable(doc)


@router.patch("/products/{product_id}", response_model=UpdateResultOut)
async def update_product(
    product_id: str,
    fields: Dict[str, Any] = Body(..., description="Fields to set; unnamed fields are left as they are"),
    repo: ProductRepo = Depends(product_repo),
):
    """
    Partial update. An unknown id is not an error: it reports matched=0, modified=0.
    """
    matched, modified = await repo.update_fields(product_id, fields)
    logger.info(f"Updated product id={product_id} matched={matched} modified={modified}")
    return {"matched": matched, "modified": modified}


@router.delete("/products/{product_id}", response_model=DeleteResultOut)
async def delete_product(product_id: str, repo: ProductRepo = Depends(product_repo)):
    deleted = await repo.delete(product_id)
    logger.info(f"Deleted product id={product_id} deleted={deleted}")
    return {"deleted": deleted}
