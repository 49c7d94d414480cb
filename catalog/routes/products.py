from __future__ import annotations

from sqlite3 import Connection
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..db import get_db
from ..logs import LogContext
from ..models import Product
from ..repository import ProductRepository
from ..repository.product_repo import SqlProductRepository

router = APIRouter(prefix="/api/products", tags=["products"])


def get_product_repository(conn: Connection = Depends(get_db)) -> ProductRepository:
    return SqlProductRepository(conn)


@router.get("", response_model=List[Product])
def api_product_list(repo: ProductRepository = Depends(get_product_repository)):
    try:
        return repo.get_all()
    except Exception as e:
        LogContext("LIST_PRODUCTS").write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")


@router.get("/{id}", response_model=Product, name="get_product")
def api_product_get(id: int, repo: ProductRepository = Depends(get_product_repository)):
    try:
        product = repo.get_by_id(id)
    except Exception as e:
        log = LogContext("GET_PRODUCT")
        log.set_entity("PRODUCT", id)
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")
    if product is None:
        return Response(status_code=404)
    return product


@router.post("", response_model=Product, status_code=201)
def api_product_create(
    body: Product,
    request: Request,
    response: Response,
    repo: ProductRepository = Depends(get_product_repository),
):
    log = LogContext("CREATE_PRODUCT")
    log.set_payload(body.model_dump(mode="json"))
    try:
        new_id = repo.create(body)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")
    body.id = new_id
    response.headers["Location"] = str(request.url_for("get_product", id=new_id))
    log.set_entity("PRODUCT", new_id)
    log.set_after(body.model_dump(mode="json"))
    log.write("OK")
    return body


@router.put("/{id}", status_code=204)
def api_product_update(id: int, body: Product, repo: ProductRepository = Depends(get_product_repository)):
    log = LogContext("UPDATE_PRODUCT")
    log.set_entity("PRODUCT", id)
    log.set_payload(body.model_dump(mode="json"))
    if body.id != id:
        log.write("BAD_REQUEST", "id_mismatch")
        return Response(status_code=400)
    try:
        ok = repo.update(body)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")
    if not ok:
        log.write("NOT_FOUND")
        return Response(status_code=404)
    log.write("OK")
    return Response(status_code=204)


@router.delete("/{id}", status_code=204)
def api_product_delete(id: int, repo: ProductRepository = Depends(get_product_repository)):
    log = LogContext("DELETE_PRODUCT")
    log.set_entity("PRODUCT", id)
    try:
        ok = repo.delete(id)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")
    if not ok:
        log.write("NOT_FOUND")
        return Response(status_code=404)
    log.write("OK")
    return Response(status_code=204)
