from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

from depo import messages

class ProductGroupResponse(BaseModel):
    """
    Schemat grupy produktow uzywany w liscie wyboru formularza.
    
    Attributes:
        id: Unikalny identyfikator grupy.
        name: Nazwa grupy.
    """
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

class ProductRow(BaseModel):
    """
    Wiersz tabeli produktow, zawiera nazwe dolaczonej grupy.
    
    Attributes:
        id: Unikalny identyfikator produktu.
        stock_code: Kod magazynowy.
        material_name_1: Nazwa materialu.
        unit_of_measure: Jednostka miary.
        current_stock: Aktualny stan magazynowy.
        serial_number: Numer seryjny lub None.
        group_name: Nazwa grupy lub None, gdy produkt nie ma grupy.
    """
    id: int
    stock_code: str
    material_name_1: str
    unit_of_measure: str
    current_stock: float
    serial_number: Optional[str] = None
    group_name: Optional[str] = None

    @classmethod
    def from_product(cls, product) -> "ProductRow":
        """
        Buduje wiersz z modelu Product z zaladowana relacja grupy.
        
        Args:
            product: Instancja modelu Product.
        
        Returns:
            ProductRow: Wiersz gotowy do wyswietlenia.
        """
        return cls(
            id=product.id,
            stock_code=product.stock_code,
            material_name_1=product.material_name_1,
            unit_of_measure=product.unit_of_measure,
            current_stock=product.current_stock,
            serial_number=product.serial_number,
            group_name=product.group.name if product.group is not None else None,
        )

class ProductCreate(BaseModel):
    """
    Schemat do tworzenia nowego produktu, po walidacji formularza.
    """
    stock_code: str
    material_name_1: str
    material_name_2: Optional[str] = None
    unit_of_measure: str
    serial_number: Optional[str] = None
    group_id: int
    current_stock: float = 0

class ProductForm(BaseModel):
    """
    Surowe pola formularza nowego produktu.

    Puste napisy (rowniez same biale znaki) sa normalizowane do None,
    zanim nastapi walidacja lub zapis.
    """
    stock_code: Optional[str] = None
    material_name_1: Optional[str] = None
    material_name_2: Optional[str] = None
    unit_of_measure: Optional[str] = None
    serial_number: Optional[str] = None
    group_id: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def field_errors(self) -> dict[str, str]:
        """
        Zbiera wszystkie bledy walidacji naraz.
        
        Returns:
            dict[str, str]: Mapa nazwa pola -> komunikat bledu (pusta, gdy formularz jest poprawny).
        """
        errors = {}
        if self.stock_code is None:
            errors["stock_code"] = messages.STOCK_CODE_REQUIRED
        if self.material_name_1 is None:
            errors["material_name_1"] = messages.MATERIAL_NAME_REQUIRED
        if self.unit_of_measure is None:
            errors["unit_of_measure"] = messages.UNIT_REQUIRED
        if self.group_id is None:
            errors["group_id"] = messages.GROUP_REQUIRED
        elif _parse_int(self.group_id) is None:
            errors["group_id"] = messages.GROUP_INVALID
        return errors

    def to_create(self) -> ProductCreate:
        """
        Zamienia poprawny formularz na dane do zapisu. Wymaga pustego field_errors().
        
        Returns:
            ProductCreate: Dane nowego produktu z current_stock rownym 0.
        """
        return ProductCreate(
            stock_code=self.stock_code,
            material_name_1=self.material_name_1,
            material_name_2=self.material_name_2,
            unit_of_measure=self.unit_of_measure,
            serial_number=self.serial_number,
            group_id=_parse_int(self.group_id),
        )

# zakres kolumny Integer (32 bity)
INT_MIN = -2**31
INT_MAX = 2**31 - 1

def _parse_int(value: str) -> Optional[int]:
    if not (value.isascii() and value.removeprefix("-").isdigit()):
        return None
    number = int(value, 10)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number
