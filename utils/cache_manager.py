from cachetools import TTLCache


class CacheManager:
    """Ranked search results, keyed by the query's terms and the result limit.

    Queries that reduce to the same terms ("texture", "TEXTURE!") share an
    entry. The whole cache is cleared whenever the index is reloaded.
    """

    def __init__(self, max_size=100, ttl=3600):
        self.cache = TTLCache(maxsize=max_size, ttl=ttl)

    def _generate_key(self, terms, limit):
        return (tuple(terms), limit)

    def store(self, terms, limit, ranked):
        self.cache[self._generate_key(terms, limit)] = ranked

    def lookup(self, terms, limit):
        """Ranked documents for these terms, or None on a miss"""
        return self.cache.get(self._generate_key(terms, limit))

    def clear(self):
        self.cache.clear()

    def stats(self):
        return {
            'size': len(self.cache),
            'max_size': self.cache.maxsize,
            'ttl': self.cache.ttl
        }
