from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from depo.database import Base

class ProductGroup(Base):
    """
    Model SQLAlchemy reprezentujacy grupe produktow.
    
    Attributes:
        id: Unikalny identyfikator grupy.
        name: Nazwa grupy wyswietlana na liscie i w formularzu.
    """
    __tablename__ = "product_groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)

    products = relationship("Product", back_populates="group")

class Product(Base):
    """
    Model SQLAlchemy reprezentujacy produkt w magazynie.
    
    Attributes:
        id: Unikalny identyfikator produktu.
        stock_code: Unikalny kod magazynowy.
        material_name_1: Nazwa materialu.
        material_name_2: Opcjonalna druga nazwa materialu.
        unit_of_measure: Jednostka miary.
        serial_number: Opcjonalny numer seryjny.
        group_id: Identyfikator grupy produktow.
        current_stock: Aktualny stan magazynowy (domyslnie 0).
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    stock_code = Column(String, unique=True, nullable=False)
    material_name_1 = Column(String, nullable=False, index=True)
    material_name_2 = Column(String, nullable=True)
    unit_of_measure = Column(String, nullable=False)
    serial_number = Column(String, nullable=True)
    group_id = Column(Integer, ForeignKey("product_groups.id", ondelete="SET NULL"), nullable=True)
    current_stock = Column(Float, nullable=False, default=0)

    group = relationship("ProductGroup", back_populates="products")

class AuthSession(Base):
    """
    Sesja uwierzytelniona wydana przez dostawce logowania.

    Ciasteczko przechowuje surowy token, w bazie trzymany jest tylko jego skrot.
    
    Attributes:
        id: Unikalny identyfikator sesji.
        token_hash: Skrot SHA-256 tokenu sesji.
        user_id: Identyfikator uzytkownika u dostawcy logowania.
        expires_at: Moment wygasniecia sesji (brak oznacza sesje bezterminowa).
    """
    __tablename__ = "auth_sessions"

    id = Column(Integer, primary_key=True, index=True)
    token_hash = Column(String(64), unique=True, nullable=False, index=True)
    user_id = Column(String, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=True)
