"""
Ingestion layer — turns weather payloads into ``WeatherSnapshot`` models.

Submodules:
  loader    — JSON file / provider payload (weatherapi.com) → WeatherSnapshot
  synthetic — Seeded synthetic snapshots for demos and offline runs

Fetching from the weather provider over HTTP is not part of this package;
save the provider response to disk and point ``farmcast advise --snapshot``
at it.
"""
