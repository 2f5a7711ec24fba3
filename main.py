import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import get_settings
from src.logging_config import setup_logging
from src.routers import insights as insights_router
from src.schemas.insights import HealthResponse

settings = get_settings()

# Configure logging before anything else logs
setup_logging(settings.log_level, json_logs=settings.json_logs)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(insights_router.router, prefix=settings.api_prefix, tags=["insights"])
logger.info(f"Insights router mounted at {settings.api_prefix}")


@app.get("/", tags=["Health Check"])
async def read_root():
    """Root endpoint for basic health check."""
    return {"status": "ok", "message": f"{settings.app_name} is running."}


@app.get("/health", response_model=HealthResponse, tags=["Health Check"])
async def health_check():
    return HealthResponse(status="ok", service=settings.app_name)


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
