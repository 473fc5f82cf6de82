"""HTTP API for the arithmetic evaluator (FastAPI app and pydantic models)."""
