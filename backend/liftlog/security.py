from typing import Any, Dict
from jose import jwt
from jose.exceptions import JWTError
from liftlog.settings import get_settings

def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify a bearer token minted by the external identity service.
    Checks signature, expiry and (when configured) audience. Raise if invalid.
    """
    s = get_settings()
    payload = jwt.decode(
        token,
        s.AUTH_JWT_SECRET,
        algorithms=[s.AUTH_JWT_ALGORITHM],
        audience=s.AUTH_JWT_AUDIENCE,
        options={
            "verify_signature": True,
            "verify_exp": True,   # ensure `exp` is checked
            "verify_aud": s.AUTH_JWT_AUDIENCE is not None,
        },
    )
    # Hard-require the claims we rely on
    if "exp" not in payload:
        raise JWTError("Missing exp")
    if not payload.get("sub"):
        raise JWTError("Missing sub")
    return payload
