# Infrastructure Layer
# ====================
# Contains everything that touches the outside world:
# - persistence/: ReviewRepository contract, SQLite and in-memory stores
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/presentation layers.
