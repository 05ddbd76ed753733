# Presentation Layer
# ==================
# - app.py:        FastAPI app factory, routes and dependency wiring
# - controller.py: status-code and payload logic for /BookReviews
# - schemas.py:    pydantic request/response models
