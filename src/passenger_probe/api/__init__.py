"""HTTP surface: FastAPI app and the health route."""
