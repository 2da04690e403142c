from userhub.infrastructure.cache.redis_cache import RedisCache

__all__ = ["RedisCache"]
