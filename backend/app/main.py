import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.analysis.exceptions import InvalidArgumentError
from app.api.endpoints import esg
from app.config import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(esg.router)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """Return a 400 envelope for invalid arguments not handled by a route."""
    logger.warning("Invalid argument on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={
            "error": "invalid_argument",
            "message": str(exc),
            "argument": exc.argument,
        },
    )


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": settings.app_name}
