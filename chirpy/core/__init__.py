"""
Core utilities shared across the Chirpy API.

This package hosts:
- configuration helpers (env vars, paths, secrets)
- cross-cutting services such as password hashing, JWT handling and
  request metrics.

Routers and services should depend on these primitives instead of reading
os.environ or touching crypto libraries directly.
"""
