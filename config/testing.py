import os

from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = {**Config.db_config(), "database": os.getenv("DB_NAME", "pharmacy_payroll_test")}

PHARMACY_NAME = "Test Pharmacy"
SESSION_DAYS = 1
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
