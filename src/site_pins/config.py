import os
from dotenv import load_dotenv

load_dotenv()  # take environment variables from .env.

# markers.db lives in the working directory unless overridden
DB_PATH = os.environ.get("MARKERS_DB_PATH") or os.path.join(os.getcwd(), "markers.db")

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))
DEBUG = (os.environ.get("FLASK_DEBUG") or "").strip().lower() in {"1", "true", "yes", "on"}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
