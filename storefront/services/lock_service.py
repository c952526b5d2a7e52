import redis
from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


class LockService:
    """
    -krotka blokada na pare (user, item) przy dodawaniu do koszyka
    -zwalnianie locka tylko przez wlasciciela (lua)
    """

    def __init__(self, url: str | None = None):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def cart_key(user_id: int, item_id: int) -> str:
        return f"cart:{user_id}:item:{item_id}:lock"

    @redis_retry()
    def acquire(self, key: str, owner: str, ttl: int) -> bool:
        logger.info(f"Acquire lock {key}")
        #SET key owner NX EX ttl, lock sam wygasa po ttl
        return bool(self.redis.set(name=key, value=owner, nx=True, ex=ttl))

    @redis_retry()
    def release(self, key: str, owner: str) -> bool:
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, owner)
        return bool(res)
