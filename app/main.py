from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from app.config import settings
from app.dependencies import build_services
from app.routes import dashboard, quizzes
from app.utils.time_utils import utc_now
import logging

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Clients are created once per process and released on shutdown
    app.state.services = build_services(settings)
    logging.info(f"{settings.app_name} started, serving under {settings.api_prefix}")
    yield
    await app.state.services.generator.aclose()
    logging.info(f"{settings.app_name} stopped")

app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="API for generating, taking and grading AI-written quizzes",
    lifespan=lifespan,
)

# CORS middleware for cross-origin requests (adjust origins for production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with prefixes and tags
app.include_router(dashboard.router, prefix=f"{settings.api_prefix}/dashboard", tags=["Dashboard"])
app.include_router(quizzes.router, prefix=f"{settings.api_prefix}/quizzes", tags=["Quizzes"])

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies and parameters are client errors with the usual 400 shape
    logging.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request."})

@app.get(f"{settings.api_prefix}/", response_class=PlainTextResponse)
async def root():
    return "Hello from the API!"

@app.get(f"{settings.api_prefix}/health")
async def health():
    return {"status": "ok", "timestamp": utc_now().isoformat()}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)
