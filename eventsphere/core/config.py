import os

# Admin credentials
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "eventsphere2026")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Where EventSphereClient finds the server by default
API_URL = os.getenv("EVENTSPHERE_API_URL", "http://localhost:5000")

# Load the demo catalog into the registry on startup
SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "true")


def get_admin_credentials() -> tuple[str, str]:
    return ADMIN_USERNAME, ADMIN_PASSWORD


def get_cors_origins() -> list[str]:
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]


def should_seed_demo_data() -> bool:
    return SEED_DEMO_DATA.strip().lower() not in ("0", "false", "no", "off", "")


def get_log_level() -> str:
    return LOG_LEVEL.upper()


def get_api_url() -> str:
    return API_URL
