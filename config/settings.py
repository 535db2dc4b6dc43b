import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BASE_DIR / "output")))

# Application settings
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "5000"))

# Payroll settings
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "¥")
TAX_TABLE = os.getenv("TAX_TABLE", "statutory")

# Secret for Flask app
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
