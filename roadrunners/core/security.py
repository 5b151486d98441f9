from jose import jwt, JWTError
from typing import Optional, Dict, Any
from roadrunners.core.config import settings

SUPABASE_JWT_ALGORITHM = "HS256"


# Decodes and validates a Supabase access token returning its payload
def decode_token(token: str, secret: Optional[str] = None, audience: Optional[str] = None) -> Optional[Dict[str, Any]]:
    secret = secret or settings.SUPABASE_JWT_SECRET
    if not token or not secret:
        return None
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=audience or settings.SUPABASE_JWT_AUDIENCE,
        )
    except JWTError:
        return None


# Builds the public user view from a decoded token payload
def user_from_claims(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    user_id = payload.get("sub")
    if not user_id:
        return None
    metadata = payload.get("user_metadata") or {}
    return {
        "id": user_id,
        "email": payload.get("email"),
        "name": metadata.get("name"),
    }
