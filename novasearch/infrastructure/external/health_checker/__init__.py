from .redis_health_checker import RedisHealthChecker

__all__ = ["RedisHealthChecker"]
