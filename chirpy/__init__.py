"""Chirpy: short posts backed by a single-file JSON store."""
