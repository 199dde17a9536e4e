import os


class Config:
    """Settings shared by every environment, read from the process env / .env."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "otms-local-secret"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", os.environ.get("DB_DATABASE", "otms_db"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_JSON = bool(int(os.environ.get("LOG_JSON", "1")))

    @classmethod
    def db_config(cls) -> dict:
        """mysql-connector keyword arguments."""
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
