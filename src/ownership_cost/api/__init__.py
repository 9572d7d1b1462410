"""HTTP API — FastAPI surface over the cost engine."""
