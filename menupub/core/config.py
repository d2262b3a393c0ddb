from pydantic_settings import BaseSettings, SettingsConfigDict

from menupub.core.constants import MENU_CACHE_TTL_MS


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    session_secret: str = "menupub-dev-session-secret"  # 🔐 Override in production
    auth_check_timeout_seconds: float = 5.0
    menu_cache_ttl_ms: int = MENU_CACHE_TTL_MS
    password_hash_iterations: int = 120000
    log_level: str = "INFO"


app_config = AppConfig()
