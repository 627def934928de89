# app/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

DEFAULT_JWT_SECRET = "dev-secret"

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Blog Demo API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # CORS origins for frontend (comma separated, "*" allows any)
    CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Token signing
    # Read once when the app is built; never logged or returned to clients
    jwt_secret: str = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
    access_token_expire_hours: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

    # Uploads
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    max_upload_bytes: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))  # 10 MiB

    # Demo content (John Doe + one post) seeded when the app is built
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "true").lower() in ("true", "1", "yes")

settings = Settings()  # Instantiate configuration
