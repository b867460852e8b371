"""
Key-scoped query cache with optimistic mutations.

Keys are tuples, e.g. ('documentos', 12). Invalidating a prefix drops
every key that starts with it.
"""
import copy
import logging

logger = logging.getLogger(__name__)

_MISSING = object()


class QueryCache:

    def __init__(self):
        self._entries = {}

    def get(self, key, default=None):
        return self._entries.get(key, default)

    def set(self, key, value):
        self._entries[key] = value

    def __contains__(self, key):
        return key in self._entries

    def invalidate(self, prefix):
        """Drop every entry whose key starts with prefix."""
        prefix = tuple(prefix)
        stale = [key for key in self._entries if key[:len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def fetch(self, key, loader, refresh=False):
        """Cached value of key, loading it with loader() when missing."""
        if refresh or key not in self._entries:
            self._entries[key] = loader()
        return self._entries[key]

    def mutate_optimistic(self, key, patch, request):
        """
        Apply patch(value) to the cached value, then run request().

        The previous value is restored when request raises; on success the
        key is invalidated so the next read refetches. Returns request's
        result.
        """
        snapshot = self._entries.get(key, _MISSING)
        if snapshot is not _MISSING:
            self._entries[key] = patch(copy.deepcopy(snapshot))

        try:
            result = request()
        except Exception:
            if snapshot is _MISSING:
                self._entries.pop(key, None)
            else:
                self._entries[key] = snapshot
            logger.debug(f"Optimistic update of {key} rolled back")
            raise

        self.invalidate(key)
        return result
