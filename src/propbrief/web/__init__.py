"""Web layer: FastAPI app factory, JSON API and brief pages."""
