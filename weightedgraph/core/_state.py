class _State:
    def __init__(self):
        self.version = 0
        self._view_cache = {}

    def bump(self) -> int:
        self.version += 1
        self._view_cache.clear()
        return self.version

    def cached(self, key, build):
        entry = self._view_cache.get(key)
        if entry is None or self.dirty_since(entry[0]):
            entry = self._view_cache[key] = (self.version, build())
        return entry[1]

    def dirty_since(self, version: int) -> bool:
        return self.version > version
