import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    SQLITE_FOREIGN_KEYS = bool(data.get("SQLITE_FOREIGN_KEYS", True))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Deadline for one create-invoice call; on expiry the transaction is rolled back
    INVOICE_TIMEOUT_SECONDS = float(data.get("INVOICE_TIMEOUT_SECONDS", 10.0))
