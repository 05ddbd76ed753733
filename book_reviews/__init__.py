# Book Reviews - Review Collection & Rating Summary Service
# ==========================================================
# A small HTTP service using Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI routes and the BookReviews controller
# - Domain:         Review entity and summary aggregation (no external dependencies)
# - Infrastructure: Storage repositories and settings
#
# The controller only talks to storage through the ReviewRepository contract,
# so the SQLite store can be swapped for any other backend (or a test double).

__version__ = "0.1.0"
