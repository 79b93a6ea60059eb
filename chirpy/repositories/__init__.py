"""
Persistence adapters.

These modules encapsulate how chirps and users are stored/retrieved (a single
JSON file). Services and routers go through RecordStore rather than touching
the file.
"""
