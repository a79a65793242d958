"""Komunikaty wyswietlane uzytkownikowi (jezyk turecki)."""

PRODUCTS_TITLE = "Depo Yönetimi - Ürün Yönetimi"
NEW_PRODUCT_TITLE = "Depo Yönetimi - Yeni Ürün Ekle"
LOGIN_TITLE = "Depo Yönetimi - Giriş"

PRODUCTS_LOAD_ERROR = "Ürünler yüklenirken bir hata oluştu."
GROUPS_LOAD_ERROR = "Ürün grupları yüklenirken bir hata oluştu."
PRODUCT_INSERT_ERROR = "Ürün eklenirken bir veritabanı hatası oluştu."
DUPLICATE_STOCK_CODE = "Bu Stok Kodu ({stock_code}) zaten mevcut."

STOCK_CODE_REQUIRED = "Stok Kodu zorunludur."
MATERIAL_NAME_REQUIRED = "Malzeme Adı zorunludur."
UNIT_REQUIRED = "Birim zorunludur."
GROUP_REQUIRED = "Ürün Grubu seçilmelidir."
GROUP_INVALID = "Geçersiz Ürün Grubu."

NO_PRODUCTS = "Gösterilecek ürün bulunamadı."
NO_GROUP = "N/A"
NO_SERIAL = "-"
