import os


class Config:
    """Values shared by every environment; each settings module starts from these."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "pharmacy_payroll")

    PHARMACY_NAME = os.environ.get("PHARMACY_NAME", "제이팜약국")
    SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "7"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
