from intolink.dao.redis.redis_key_schema import RedisKeySchema
from intolink.dao.redis.mixins import RedisClientMixin
from intolink.dao.redis.short_url_redis_dao import ShortURLRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortURLRedisDAO',
]
