from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Novalife Blog API"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Auth
    SECRET_KEY: str = "supersecretkey_change_me_in_production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 1 week
    AUTH_COOKIE_NAME: str = "auth-token"

    # Seed values for admin.json, only used the first time it is read
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password123"
    ADMIN_EMAIL: str = "admin@ainovalife.com"
    ADMIN_NAME: str = "管理员"

    # Local filesystem fallback
    DATA_DIR: str = "data"
    UPLOAD_DIR: str = "public/uploads"

    # Uploads
    UPLOAD_MAX_BYTES: int = 5 * 1024 * 1024
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/png", "image/gif", "image/webp"]

    # Cloudflare R2 (S3 compatible)
    R2_ACCOUNT_ID: str = ""
    R2_ACCESS_KEY_ID: str = ""
    R2_SECRET_ACCESS_KEY: str = ""
    R2_BUCKET: str = ""
    R2_ENDPOINT: str = ""

    @property
    def R2_ENABLED(self) -> bool:
        return all([self.R2_ACCOUNT_ID, self.R2_ACCESS_KEY_ID, self.R2_SECRET_ACCESS_KEY, self.R2_BUCKET])

    @property
    def R2_ENDPOINT_URL(self) -> str:
        return self.R2_ENDPOINT or f"https://{self.R2_ACCOUNT_ID}.r2.cloudflarestorage.com"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
