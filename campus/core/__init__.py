"""
Core utilities shared across the campus booking API.

This package hosts:
- configuration helpers (env vars, storage paths, feature flags)
- cross-cutting services such as logging, password hashing and rate limits.

Services and routers depend on these primitives instead of reading
os.environ or configuring handlers themselves.
"""
