"""FastAPI application for the ParkSense route engine."""

import logging

from fastapi import FastAPI

from parksense.api.routes import router as api_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="ParkSense",
    description="Walking route planning and recommendation for park trail networks",
    version="0.1.0",
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
