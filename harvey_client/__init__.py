"""
Harvey Classification Lookup Client
===================================
Hexagonal (Ports & Adapters) client for the Harvey classification REST API
(ISCO/ESCO occupations, positions, schools, KOV, ISCED, SK NACE, regions…).

Layer map
─────────────────────────────────────────────────────
  config/       Settings loaded from the environment / .env
  domain/       Pure objects: resources, search schemas, formats, exceptions
  ports/        Abstract interfaces (Python Protocols) for cache and HTTP
  adapters/     Concrete implementations of each Port (requests, cachetools)
  services/     Cache keys, lookup engine, fulltext compositor, typed client
  interfaces/   Delivery layer: CLI
  tests/        Full test suite: unit / integration / e2e

Swapping the cache backend (e.g. Redis):
  1. Write a new adapter in adapters/ implementing CachePort
  2. Change the single wiring line in services/container.py
  3. Done — zero other files touched
"""
__version__ = "2.0.0"
