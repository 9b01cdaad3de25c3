from dotenv import load_dotenv
import os

load_dotenv()


def get_env_int(var_name, default=0):
    value = os.getenv(var_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


LOG_LEVEL = os.getenv("BCH32_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_HRP = os.getenv("BCH32_DEFAULT_HRP", "bc")
DEFAULT_VERSION = get_env_int("BCH32_DEFAULT_VERSION", 0)
