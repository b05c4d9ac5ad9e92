import logging
import os
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ALLOWED_ORIGINS, LOG_LEVEL
from db import db_manager
from fuel import router as fuel_router

# Basic logging configuration
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI App
app = FastAPI(title="Fuel Log")

if CORS_ALLOWED_ORIGINS:
    origins = CORS_ALLOWED_ORIGINS
    logger.info("CORS configured with specific origins: %s", origins)
else:
    # Development fallback - allow localhost and common dev ports
    origins = [
        "http://localhost:3000",
        "http://localhost:8081",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8081",
    ]
    logger.warning(
        "CORS_ALLOWED_ORIGINS not set. Using development defaults: %s",
        origins,
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(fuel_router)


# --- Application Lifecycle Events ---
@app.on_event("startup")
async def startup_event():
    """Bind the document models to MongoDB on application startup."""
    try:
        await db_manager.init_beanie()
        logger.info("Application startup completed successfully.")
    except Exception:
        logger.critical("CRITICAL: Failed to initialize database.", exc_info=True)
        raise


@app.on_event("shutdown")
async def shutdown_event():
    """Close the MongoDB client on application shutdown."""
    db_manager.close()
    logger.info("Application shutdown completed.")


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc: Exception):
    """Log unhandled errors with an id the client can report."""
    error_id = str(uuid.uuid4())
    logger.error(
        "Internal Server Error (ID: %s): Request %s %s failed. Exception: %s",
        error_id,
        request.method,
        request.url,
        str(exc),
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "error_id": error_id},
    )


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    uvicorn.run("app:app", host="0.0.0.0", port=port, log_level="info", reload=True)
