"""
Warstwa dostepu do danych magazynu.

Kazda funkcja zamienia bledy SQLAlchemy na StoreError z kodem bledu bazy
(SQLSTATE w przypadku PostgreSQL), tak aby handlery mogly go zmapowac na odpowiedz HTTP.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import contains_eager

from depo.models import Product, ProductGroup
from depo.schemas import ProductCreate

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

class StoreError(Exception):
    """
    Blad zgloszony przez baze danych.
    
    Attributes:
        message: Opis bledu.
        code: Kod bledu bazy (np. "23505") lub None, gdy nie da sie go ustalic.
    """
    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

def error_code(exc: SQLAlchemyError) -> Optional[str]:
    """
    Ustala kod bledu bazy dla wyjatku SQLAlchemy.
    
    Args:
        exc: Wyjatek zgloszony przez SQLAlchemy.
    
    Returns:
        Optional[str]: SQLSTATE bledu, dla SQLite naruszenia unikalnosci i klucza obcego
        mapowane sa na "23505" i "23503".
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return None
    for source in (orig, orig.__cause__):
        code = getattr(source, "sqlstate", None) or getattr(source, "pgcode", None)
        if code:
            return code
    # SQLite nie zna SQLSTATE
    if getattr(orig, "sqlite_errorname", None) == "SQLITE_CONSTRAINT_UNIQUE":
        return UNIQUE_VIOLATION
    if isinstance(exc, IntegrityError) and "UNIQUE constraint failed" in str(orig):
        return UNIQUE_VIOLATION
    if isinstance(exc, IntegrityError) and "FOREIGN KEY constraint failed" in str(orig):
        return FOREIGN_KEY_VIOLATION
    return None

async def select_products(db: AsyncSession) -> list[Product]:
    """
    Pobiera wszystkie produkty z dolaczona grupa (left outer join), posortowane po nazwie.
    
    Args:
        db: Sesja bazy danych.
    
    Returns:
        list[Product]: Produkty rosnaco po material_name_1.
    
    Raises:
        StoreError: Gdy zapytanie sie nie powiedzie.
    """
    query = (
        select(Product)
        .outerjoin(Product.group)
        .options(contains_eager(Product.group))
        .order_by(Product.material_name_1.asc())
        .execution_options(populate_existing=True)
    )
    try:
        result = await db.execute(query)
    except SQLAlchemyError as exc:
        raise StoreError(str(exc), error_code(exc)) from exc
    return list(result.scalars().unique().all())

async def select_groups(db: AsyncSession) -> list[ProductGroup]:
    """
    Pobiera wszystkie grupy produktow posortowane po nazwie.
    
    Args:
        db: Sesja bazy danych.
    
    Returns:
        list[ProductGroup]: Grupy rosnaco po name.
    
    Raises:
        StoreError: Gdy zapytanie sie nie powiedzie.
    """
    try:
        result = await db.execute(select(ProductGroup).order_by(ProductGroup.name.asc()))
    except SQLAlchemyError as exc:
        raise StoreError(str(exc), error_code(exc)) from exc
    return list(result.scalars().all())

async def insert_product(db: AsyncSession, product: ProductCreate) -> Product:
    """
    Zapisuje nowy produkt w bazie danych.
    
    Args:
        db: Sesja bazy danych.
        product: Zwalidowane dane produktu.
    
    Returns:
        Product: Utworzony produkt z przypisanym ID.
    
    Raises:
        StoreError: Gdy zapis sie nie powiedzie, np. przy zduplikowanym stock_code.
    """
    new_product = Product(**product.model_dump())
    db.add(new_product)
    try:
        await db.commit()
        await db.refresh(new_product)
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StoreError(str(exc), error_code(exc)) from exc
    except OverflowError as exc:
        # sterownik SQLite odrzuca liczby spoza 64 bitow przed SQLAlchemy
        await db.rollback()
        raise StoreError(str(exc)) from exc
    return new_product
