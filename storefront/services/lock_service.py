# storefront/services/lock_service.py
import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator

import redis
from tenacity import Retrying, retry_if_result, stop_after_delay, wait_fixed

from storefront.domain.errors import LockTimeoutError
from storefront.utils.logging import get_logger
from storefront.utils.retry import redis_retry
from storefront.utils.settings import (
    CART_LOCK_BACKEND,
    CART_LOCK_TTL_SECONDS,
    CART_LOCK_WAIT_SECONDS,
    REDIS_URL,
)

logger = get_logger(__name__)

# compare-and-delete: only the holder's token may release the key
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""
# redis runs the script atomically, nothing can slip in between GET and DEL


class NullLockService:
    """No locking. Concurrent adds to the same line may lose an increment."""

    @contextmanager
    def hold(self, session_id: str) -> Iterator[None]:
        yield


class LocalLockService:
    """
    One threading.Lock per session id, good for a single process.
    An entry lives only while some thread holds or waits for it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # session_id -> [lock, number of holders and waiters]
        self._locks: Dict[str, list] = {}

    @contextmanager
    def hold(self, session_id: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(session_id, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[session_id]


class LockService:
    """
    -per-session cart lock in redis (SET NX EX)
    -release only by the owner (lua)
    -waiting for the lock: tenacity, every 50ms until wait_seconds
    """

    def __init__(
        self,
        url: str | None = None,
        client: redis.Redis | None = None,
        ttl: int = CART_LOCK_TTL_SECONDS,
        wait_seconds: float = CART_LOCK_WAIT_SECONDS,
    ):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl
        self.wait_seconds = wait_seconds

    @staticmethod
    def _key(session_id: str) -> str:
        return f"cart:{session_id}:lock"

    @redis_retry()
    def acquire_session_lock(self, session_id: str, token: str, ttl: int) -> bool:
        key = self._key(session_id)
        logger.debug(f"Acquire lock {key}")
        # SET cart:abc:lock <token> NX EX 10 - expires by itself if the holder dies
        return bool(self.redis.set(name=key, value=token, nx=True, ex=ttl))

    @redis_retry()
    def release_session_lock(self, session_id: str, token: str) -> bool:
        key = self._key(session_id)
        logger.debug(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    def _wait_for_lock(self, session_id: str, token: str) -> bool:
        retrying = Retrying(
            retry=retry_if_result(lambda acquired: not acquired),
            wait=wait_fixed(0.05),
            stop=stop_after_delay(self.wait_seconds),
            retry_error_callback=lambda state: False,
        )
        return retrying(self.acquire_session_lock, session_id, token, self.ttl)

    @contextmanager
    def hold(self, session_id: str) -> Iterator[None]:
        token = uuid.uuid4().hex
        if not self._wait_for_lock(session_id, token):
            raise LockTimeoutError(f"Cart for session {session_id!r} is busy")
        try:
            yield
        finally:
            if not self.release_session_lock(session_id, token):
                logger.warning(f"Lock for session {session_id} expired before release")


def build_lock_service(backend: str = CART_LOCK_BACKEND):
    if backend == "local":
        return LocalLockService()
    if backend == "redis":
        return LockService()
    if backend == "none":
        logger.warning("Cart locking disabled, concurrent adds may lose updates")
        return NullLockService()
    raise ValueError(f"Unknown CART_LOCK_BACKEND {backend!r}, expected local, redis or none")
