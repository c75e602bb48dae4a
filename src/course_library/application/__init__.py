"""Application layer – pagination, collection-query shaping, key binding."""
