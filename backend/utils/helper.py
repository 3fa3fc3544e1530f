# backend/utils/helper.py
import base64
from typing import Any, Dict, Optional, Tuple


# -------------------------
# JSON helpers
# -------------------------
def json_ok(data: Any = None) -> Dict[str, Any]:
    return {"ok": True, "data": data}


# -------------------------
# Request body helpers
# -------------------------
def read_credentials(body: Any) -> Optional[Tuple[str, str]]:
    """Pull (username, password) out of a JSON body, or None when malformed."""
    if not isinstance(body, dict):
        return None
    username = body.get("username")
    password = body.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        return None
    return username, password


# -------------------------
# Encoding helpers
# -------------------------
def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
