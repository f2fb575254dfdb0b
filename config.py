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
    API_HOST = data.get("API_HOST", "127.0.0.1")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Ledger clock: simulated start date (YYYY-MM-DD); empty means today
    LEDGER_START_DATE = data.get("LEDGER_START_DATE", "")

    # Load the sample customers, credits and payments on startup
    SEED_SAMPLE_DATA = bool(data.get("SEED_SAMPLE_DATA", True))

    # Reject credits/payments for customer ids that do not exist
    ENFORCE_CUSTOMER_REFERENCE = bool(data.get("ENFORCE_CUSTOMER_REFERENCE", True))

    REMINDER_INTERVAL_DAYS = data.get("REMINDER_INTERVAL_DAYS", 7)
    NEW_CUSTOMER_WINDOW_DAYS = data.get("NEW_CUSTOMER_WINDOW_DAYS", 7)
