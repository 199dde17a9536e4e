from .config import Config

SECRET_KEY = Config.SECRET_KEY

DB_CONFIG = Config.db_config()

DEBUG = False

LOG_LEVEL = Config.LOG_LEVEL
LOG_JSON = Config.LOG_JSON
