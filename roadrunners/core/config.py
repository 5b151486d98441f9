import os
import logging
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer value for %s", name)
        return default


class Settings:
    PROJECT_NAME: str = "RoadRunners Expeditions API"
    API_PREFIX: str = os.getenv("API_PREFIX", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    MONGODB_URI: str = os.getenv("MONGODB_URI")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME")
    CLIENT_URL: str = os.getenv("CLIENT_URL", "http://localhost:5173")
    SUPABASE_URL: str = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_ROLE: str = os.getenv("SUPABASE_SERVICE_ROLE")
    SUPABASE_ANON_PUBLIC: str = os.getenv("SUPABASE_ANON_PUBLIC")
    # When set, user tokens are verified locally instead of calling auth.get_user
    SUPABASE_JWT_SECRET: str = os.getenv("SUPABASE_JWT_SECRET")
    SUPABASE_JWT_AUDIENCE: str = os.getenv("SUPABASE_JWT_AUDIENCE", "authenticated")
    USER_TOKEN_HEADER: str = "X-User-Token"
    PERMITS_BUCKET: str = os.getenv("PERMITS_BUCKET", "permit-documents")
    SIGNED_URL_EXPIRES_SECONDS: int = _env_int("SIGNED_URL_EXPIRES_SECONDS", 3600)
    MAX_UPLOAD_BYTES: int = _env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)
    PERMIT_STRICT_TRANSITIONS: bool = _env_bool("PERMIT_STRICT_TRANSITIONS", False)


settings = Settings()


def _mask_secret(val: str) -> str:
    if not val:
        return "<missing>"
    if len(val) <= 8:
        return "*" * len(val)
    return f"{val[:4]}...{val[-4:]}"


def _mask_url(url: str) -> str:
    # Keep scheme and host, drop credentials and path
    try:
        from urllib.parse import urlparse
        p = urlparse(url)
        netloc = p.hostname or ""
        if p.port:
            netloc = f"{netloc}:{p.port}"
        return f"{p.scheme}://{netloc}"
    except Exception:
        return _mask_secret(url)


def describe_settings() -> dict:
    """Redacted view of the settings, safe to log at startup."""
    return {
        "API_PREFIX": settings.API_PREFIX or "/",
        "MONGODB_DB_NAME": settings.MONGODB_DB_NAME,
        "SUPABASE_URL": _mask_url(settings.SUPABASE_URL) if settings.SUPABASE_URL else None,
        "SUPABASE_SERVICE_ROLE": _mask_secret(settings.SUPABASE_SERVICE_ROLE),
        "SUPABASE_JWT_SECRET": _mask_secret(settings.SUPABASE_JWT_SECRET),
        "PERMITS_BUCKET": settings.PERMITS_BUCKET,
        "PERMIT_STRICT_TRANSITIONS": settings.PERMIT_STRICT_TRANSITIONS,
    }
