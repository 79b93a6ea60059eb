"""
High-level use cases for the Chirpy API.

Each service module orchestrates the record store and core helpers to
implement business rules (register, login, list chirps, etc.).

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON database or tokens directly.
"""
