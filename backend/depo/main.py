from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Depends, Form, Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession
from contextlib import asynccontextmanager

from depo import handlers, messages
from depo.auth import get_auth_session
from depo.config import LOG_LEVEL, PRODUCTS_URL
from depo.database import engine, get_db, init_models
from depo.formatting import format_stock, or_placeholder
from depo.logging_config import configure_logging
from depo.models import AuthSession
from depo.results import Failure, Redirect, Rendered
from depo.schemas import ProductForm

configure_logging(LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Menedzer kontekstu cyklu zycia aplikacji, inicjalizuje tabele bazy danych przy starcie.

    Args:
        app: Instancja aplikacji FastAPI.

    Yields:
        None: Przekazuje kontrole do aplikacji podczas jej dzialania.
    """
    await init_models(engine)

    yield

    await engine.dispose()

app = FastAPI(lifespan=lifespan, title="Depo Yönetimi")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["stock"] = format_stock
templates.env.filters["or_placeholder"] = or_placeholder
templates.env.globals["messages"] = messages

def to_response(request: Request, result: Redirect | Rendered | Failure) -> Response:
    """
    Zamienia wynik handlera na odpowiedz HTTP.
    
    Args:
        request: Biezace zadanie HTTP.
        result: Redirect, Rendered albo Failure.
    
    Returns:
        Response: Przekierowanie 303, wyrenderowany szablon lub strona bledu.
    """
    if isinstance(result, Redirect):
        return RedirectResponse(result.location, status_code=303)
    if isinstance(result, Failure):
        return templates.TemplateResponse(
            request, "error.html", {"message": result.message}, status_code=result.status_code
        )
    if isinstance(result, Rendered):
        return templates.TemplateResponse(
            request, result.template, result.context, status_code=result.status_code
        )
    raise TypeError(f"Unsupported handler result: {result!r}")

#endpointy
@app.get("/")
async def index() -> RedirectResponse:
    """
    Przekierowuje na liste produktow.
    """
    return RedirectResponse(PRODUCTS_URL, status_code=303)

@app.get("/login")
async def login_page(request: Request) -> Response:
    """
    Strona logowania, na ktora kieruje straznik sesji.
    """
    return templates.TemplateResponse(request, "login.html", {"title": messages.LOGIN_TITLE})

@app.get("/products")
async def read_products(
    request: Request,
    session: Optional[AuthSession] = Depends(get_auth_session),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Wyswietla tabele produktow z nazwami grup.
    
    Args:
        request: Biezace zadanie HTTP.
        session: Sesja uwierzytelniona lub None.
        db: Sesja bazy danych.
    
    Returns:
        Response: Tabela produktow (200), blad (500) lub przekierowanie do /login.
    """
    return to_response(request, await handlers.list_products(session, db))

@app.get("/products/new")
async def new_product_form(
    request: Request,
    session: Optional[AuthSession] = Depends(get_auth_session),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Wyswietla formularz nowego produktu z lista grup.
    
    Returns:
        Response: Formularz (200), blad (500) lub przekierowanie do /login.
    """
    return to_response(request, await handlers.load_groups_for_form(session, db))

@app.post("/products/new")
async def create_product(
    request: Request,
    stock_code: Optional[str] = Form(None),
    material_name_1: Optional[str] = Form(None),
    material_name_2: Optional[str] = Form(None),
    unit_of_measure: Optional[str] = Form(None),
    serial_number: Optional[str] = Form(None),
    group_id: Optional[str] = Form(None),
    session: Optional[AuthSession] = Depends(get_auth_session),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Tworzy nowy produkt z danych formularza.
    
    Returns:
        Response: Przekierowanie do /products po sukcesie, formularz z bledami (400, 409, 500)
        lub przekierowanie do /login.
    """
    form = ProductForm(
        stock_code=stock_code,
        material_name_1=material_name_1,
        material_name_2=material_name_2,
        unit_of_measure=unit_of_measure,
        serial_number=serial_number,
        group_id=group_id,
    )
    return to_response(request, await handlers.submit_new_product(session, db, form))
