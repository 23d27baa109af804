import random
import string
import time
import uuid

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value <= 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _fallback_id() -> str:
    """Timestamp + random fragment, both base-36."""
    stamp = _to_base36(int(time.time() * 1000))
    fragment = _to_base36(random.getrandbits(52)).rjust(10, "0")
    return stamp + fragment


def generate_id() -> str:
    """
    Opaque identifier for results and shots.

    Uses a random UUID when the OS entropy source works; otherwise falls
    back to a base-36 timestamp/random concatenation. Never raises and
    never returns an empty string.
    """
    try:
        return str(uuid.uuid4())
    except (NotImplementedError, OSError) as e:
        print(f"[IDs] Secure random source unavailable, using fallback: {e}")
        return _fallback_id()
