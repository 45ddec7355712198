"""HTTP service: FastAPI app, pydantic models, and the web UI page."""
