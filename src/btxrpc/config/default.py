# btxrpc/config/default.py
import os

from dotenv import load_dotenv

load_dotenv()

VERSION = "0.1.0"
USER_AGENT = f"btxrpc/{VERSION}"

# BTXRPC_* environment variables (or a .env file) override these defaults
BASE_URL: str = os.getenv("BTXRPC_URL", "http://localhost:8332")
RPC_USER: str | None = os.getenv("BTXRPC_USER") or None
RPC_PASSWORD: str | None = os.getenv("BTXRPC_PASSWORD") or None
TIMEOUT: float = float(os.getenv("BTXRPC_TIMEOUT", "30"))
LOG_LEVEL: str = os.getenv("BTXRPC_LOG_LEVEL", "INFO")
