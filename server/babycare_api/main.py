"""Baby Care Tracker API - FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .routes import feedings, sleep, meals, tasks, notes, summary, user

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Baby Care Tracker API",
    description="Feedings, sleep, meals, tasks and notes for a single caregiver",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 instead of FastAPI's default 422."""
    log.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# Include routers
app.include_router(user.router)
app.include_router(feedings.router)
app.include_router(sleep.router)
app.include_router(meals.router)
app.include_router(tasks.router)
app.include_router(notes.router)
app.include_router(summary.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "babycare-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.babycare_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
