import os

# Каталог с CSV-файлами (resource.csv, dates.csv, orders.csv)
DATA_DIR = os.getenv("GANTT_DATA_DIR", "data")

# CORS settings
CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

# Логирование
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Uvicorn server settings
UVICORN_HOST = os.getenv("UVICORN_HOST", "0.0.0.0")
UVICORN_PORT = int(os.getenv("UVICORN_PORT", "3003"))
