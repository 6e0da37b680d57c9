"""Cache utilities - DRY Implementation"""
import time
from hashlib import sha256
from typing import Dict, Tuple, Any, Optional
from progress_point.config.settings import CacheConfig

class BaseCache:
    """In-process TTL cache"""

    def __init__(self, ttl: int = None):
        self._cache: Dict[str, Tuple[float, Dict[str, Any]]] = {}
        self.ttl = ttl or CacheConfig.LEADERBOARD_CACHE_TTL

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get cached result"""
        rec = self._cache.get(key)
        if not rec:
            return None
        expires_at, val = rec
        if expires_at < time.time():
            self._cache.pop(key, None)
            return None
        return val

    def put(self, key: str, val: Dict[str, Any]) -> None:
        """Cache result, evicting every expired entry first"""
        now = time.time()
        expired = [k for k, (expires_at, _) in self._cache.items() if expires_at < now]
        for k in expired:
            del self._cache[k]
        self._cache[key] = (now + self.ttl, val)

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Clear cache"""
        self._cache.clear()

def make_cache_key(*parts: Any) -> str:
    """Hash query parts into a cache key"""
    key_data = ":".join("" if part is None else str(part) for part in parts)
    return sha256(key_data.encode()).hexdigest()

# Global cache instance, cleared whenever marks or attendance change
leaderboard_cache = BaseCache(CacheConfig.LEADERBOARD_CACHE_TTL)
