# ---
# File: app/main.py
# Purpose: FastAPI app initialization, middleware, CORS, error envelopes,
#          and router inclusion for the forum API
# ---

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import logging

from app import config, db

# Import routers for API functionality
from app.auth.routes import router as auth_router
from app.forums.routes import router as forums_router
from app.notifications.routes import router as notifications_router
from app.health.routes import router as health_router

# ---
# Logging Configuration
# ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ---
# Initialize FastAPI app instance
# ---
app = FastAPI(title="Ponnect API")

# ---
# CORS Middleware for the web frontend
# ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=bool(config.CORS_ALLOW_ORIGINS),
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---
# Middleware: Log all incoming HTTP requests
# ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"[HTTP] {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"[HTTP] {request.method} {request.url.path} -> {response.status_code}")
    return response

# ---
# Application Lifecycle Events
# ---

@app.on_event("startup")
async def startup():
    """
    Application Startup Handler

    Connects the Prisma client once for the lifetime of the process.
    Database connection failures crash the app; it cannot serve without one.
    """
    logger.info("[STARTUP] Connecting to database...")
    await db.connect()
    logger.info("[STARTUP] ✓ Database connected successfully")

@app.on_event("shutdown")
async def shutdown():
    logger.info("[SHUTDOWN] Disconnecting database...")
    await db.disconnect()
    logger.info("[SHUTDOWN] ✓ Database disconnected")

# ---
# Error envelopes: every failure renders as {"success": false, "error": "..."}
# ---
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        message = "Missing required fields"
    else:
        field = errors[0]["loc"][-1] if errors and errors[0].get("loc") else "request"
        message = f"Invalid {field}"
    logger.info(f"[VALIDATION] {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"success": False, "error": message})

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"[UNHANDLED EXCEPTION] {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )

# ---
# Include all routers
# ---
app.include_router(auth_router)
app.include_router(forums_router)
app.include_router(notifications_router)
app.include_router(health_router)

# ---
# Liveness probe
# ---
@app.get("/health")
async def health_check():
    return {"status": "ok"}

# ---
# Entrypoint for local development with Uvicorn
# ---
if __name__ == "__main__":
    import uvicorn

    logger.info(f"[RUN] Starting Uvicorn on 0.0.0.0:{config.PORT}")
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=False
    )
