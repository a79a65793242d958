import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./depo.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"

SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "depo-auth-token")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOGIN_URL = "/login"
PRODUCTS_URL = "/products"
