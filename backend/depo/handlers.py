"""
Handlery stron produktow.

Kazdy handler zaczyna od sprawdzenia sesji i zwraca Redirect, Rendered albo Failure.
Bledy bazy danych sa przechwytywane tutaj i nie wychodza poza handler.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from depo import messages, store
from depo.config import LOGIN_URL, PRODUCTS_URL
from depo.models import AuthSession
from depo.results import Failure, Redirect, Rendered
from depo.schemas import ProductForm, ProductGroupResponse, ProductRow

logger = logging.getLogger(__name__)

async def list_products(session: Optional[AuthSession], db: AsyncSession) -> Redirect | Rendered | Failure:
    """
    Pobiera liste produktow z nazwami grup do wyswietlenia w tabeli.
    
    Args:
        session: Sesja uwierzytelniona lub None.
        db: Sesja bazy danych.
    
    Returns:
        Redirect | Rendered | Failure: Przekierowanie do logowania, tabela produktow albo blad 500.
    """
    if session is None:
        return Redirect(LOGIN_URL)

    try:
        products = await store.select_products(db)
    except store.StoreError as exc:
        logger.error("Error fetching products: %s (code=%s)", exc.message, exc.code)
        return Failure(500, messages.PRODUCTS_LOAD_ERROR)

    rows = [ProductRow.from_product(product) for product in products]
    return Rendered("products/list.html", {"products": rows, "title": messages.PRODUCTS_TITLE})

async def load_groups_for_form(session: Optional[AuthSession], db: AsyncSession) -> Redirect | Rendered | Failure:
    """
    Pobiera grupy produktow dla formularza nowego produktu.
    
    Args:
        session: Sesja uwierzytelniona lub None.
        db: Sesja bazy danych.
    
    Returns:
        Redirect | Rendered | Failure: Przekierowanie do logowania, pusty formularz albo blad 500.
    """
    if session is None:
        return Redirect(LOGIN_URL)

    try:
        groups = await store.select_groups(db)
    except store.StoreError as exc:
        logger.error("Error fetching product groups: %s (code=%s)", exc.message, exc.code)
        return Failure(500, messages.GROUPS_LOAD_ERROR)

    return _form(groups)

async def submit_new_product(session: Optional[AuthSession], db: AsyncSession, form: ProductForm) -> Redirect | Rendered:
    """
    Waliduje i zapisuje nowy produkt.
    
    Args:
        session: Sesja uwierzytelniona lub None.
        db: Sesja bazy danych.
        form: Znormalizowane pola formularza.
    
    Returns:
        Redirect | Rendered: Przekierowanie do listy po sukcesie, do logowania bez sesji,
        albo ponownie wyswietlony formularz z kodem 400, 409 lub 500.
    """
    if session is None:
        return Redirect(LOGIN_URL)

    field_errors = form.field_errors()
    if field_errors:
        return await _form_with_errors(db, form, 400, field_errors=field_errors)

    try:
        await store.insert_product(db, form.to_create())
    except store.StoreError as exc:
        logger.error("Error inserting product %s: %s (code=%s)", form.stock_code, exc.message, exc.code)
        if exc.code == store.UNIQUE_VIOLATION:
            message = messages.DUPLICATE_STOCK_CODE.format(stock_code=form.stock_code)
            return await _form_with_errors(db, form, 409, error=message)
        return await _form_with_errors(db, form, 500, error=messages.PRODUCT_INSERT_ERROR)

    logger.info("Product %s created", form.stock_code)
    return Redirect(PRODUCTS_URL)

def _form(groups, status_code: int = 200, values: Optional[dict] = None,
          field_errors: Optional[dict] = None, error: Optional[str] = None) -> Rendered:
    return Rendered(
        "products/new.html",
        {
            "title": messages.NEW_PRODUCT_TITLE,
            "groups": [ProductGroupResponse.model_validate(group) for group in groups],
            "values": values or {},
            "field_errors": field_errors or {},
            "error": error,
        },
        status_code=status_code,
    )

async def _form_with_errors(db: AsyncSession, form: ProductForm, status_code: int,
                            field_errors: Optional[dict] = None, error: Optional[str] = None) -> Rendered:
    try:
        groups = await store.select_groups(db)
    except store.StoreError as exc:
        logger.error("Error fetching product groups: %s (code=%s)", exc.message, exc.code)
        groups = []
    values = form.model_dump(exclude_none=True)
    return _form(groups, status_code, values=values, field_errors=field_errors, error=error)
