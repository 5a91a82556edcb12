import json, time, urllib.parse as _url
from enum import Enum

PREFIX = "fcp://"

def _encode(v) -> str:
    if isinstance(v, Enum):
        v = v.value
    if isinstance(v, (dict, list, tuple)):
        v = json.dumps(v, ensure_ascii=False)
    return _url.quote(str(v), safe="")

def fcp_pack(op: str, **kwargs) -> str:
    kv = [f"{k}={_encode(v)}" for k, v in kwargs.items()]
    kv.append(f"t={int(time.time())}")
    return f"{PREFIX}{op}|" + ";".join(kv)

def fcp_parse(msg: str):
    """fcp://OP|k=v;k=v -> ("OP", {k: v}). Raises ValueError on a bad envelope."""
    if not (isinstance(msg, str) and msg.startswith(PREFIX) and "|" in msg):
        raise ValueError("bad msg")
    head, payload = msg[len(PREFIX):].split("|", 1)
    op = head.strip(); args = {}
    if not op:
        raise ValueError("missing op")
    for part in payload.split(";"):
        if part and "=" in part:
            k, v = part.split("=", 1); args[k] = _url.unquote(v)
    return op, args
