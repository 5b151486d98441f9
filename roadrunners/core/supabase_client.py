import logging
from typing import Optional, Tuple

from supabase import create_client, Client
from roadrunners.core.config import settings

logger = logging.getLogger(__name__)

_CLIENT: Optional[Client] = None


def resolve_credentials() -> Tuple[str, str, str]:
    """Return (url, key, role) for the Supabase project.

    The service role is preferred: signed URLs, bucket creation and
    `auth.admin` need it. The anon key still serves token lookups.
    """
    if not settings.SUPABASE_URL:
        logger.error("SUPABASE_URL is not configured")
        raise RuntimeError("Supabase configuration missing: set SUPABASE_URL environment variable")

    if settings.SUPABASE_SERVICE_ROLE:
        return settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE, "service_role"

    if settings.SUPABASE_ANON_PUBLIC:
        logger.warning("SUPABASE_SERVICE_ROLE not set; uploads, signed URLs and signup will be refused by Supabase")
        return settings.SUPABASE_URL, settings.SUPABASE_ANON_PUBLIC, "anon"

    logger.error("No Supabase key configured (SUPABASE_SERVICE_ROLE or SUPABASE_ANON_PUBLIC)")
    raise RuntimeError("Supabase configuration missing: set SUPABASE_SERVICE_ROLE or SUPABASE_ANON_PUBLIC environment variable")


# Shared client, created on first use
def get_supabase_client() -> Client:
    global _CLIENT
    if _CLIENT is None:
        url, key, role = resolve_credentials()
        logger.info(f"Connecting to Supabase at {url.split('://')[-1]} as {role}")
        _CLIENT = create_client(url, key)
    return _CLIENT


def reset_supabase_client() -> None:
    """Drop the cached client so the next call picks up changed settings."""
    global _CLIENT
    _CLIENT = None
