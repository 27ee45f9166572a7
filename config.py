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
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Invoice store
    INVOICE_ID_START = int(data.get("INVOICE_ID_START", 1))  # First id handed out

    # Printing
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "$")
    PDF_COMPANY_NAME = data.get("PDF_COMPANY_NAME", "Invoice Generator")  # Printout heading

    # Dash UI
    UI_HOST = data.get("UI_HOST", "0.0.0.0")
    UI_PORT = data.get("UI_PORT", 8050)
    UI_DEBUG = bool(data.get("UI_DEBUG", False))
    UI_API_BASE_URL = data.get("UI_API_BASE_URL", "http://localhost:8000")
    UI_REQUEST_TIMEOUT = float(data.get("UI_REQUEST_TIMEOUT", 10.0))  # Seconds
