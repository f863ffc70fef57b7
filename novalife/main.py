import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from novalife.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("novalife")

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.R2_ENABLED:
        logger.info("Storing data in R2 bucket %s", settings.R2_BUCKET)
    else:
        logger.info("R2 not configured, storing data in %s and %s", settings.DATA_DIR, settings.UPLOAD_DIR)
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="API for the AInovalife personal blog and its admin console"
)

@app.get("/")
def read_root():
    return {"message": "Welcome to the Novalife Blog API. Visit /docs for Swagger UI."}

from novalife.routers import about, posts, messages, subscribe, contact, site_settings, admin, upload, uploads

app.include_router(about.router, prefix=f"{settings.API_PREFIX}/about", tags=["about"])
app.include_router(posts.router, prefix=f"{settings.API_PREFIX}/posts", tags=["posts"])
app.include_router(messages.router, prefix=f"{settings.API_PREFIX}/messages", tags=["messages"])
app.include_router(subscribe.router, prefix=f"{settings.API_PREFIX}/subscribe", tags=["subscribers"])
app.include_router(contact.router, prefix=f"{settings.API_PREFIX}/contact", tags=["contacts"])
app.include_router(site_settings.router, prefix=f"{settings.API_PREFIX}/settings", tags=["settings"])
app.include_router(admin.router, prefix=f"{settings.API_PREFIX}/admin", tags=["admin"])
app.include_router(upload.router, prefix=f"{settings.API_PREFIX}/upload", tags=["upload"])
app.include_router(uploads.router, tags=["uploads"])

@app.middleware("http")
async def disable_json_caching(request: Request, call_next):
    # JSON responses must never be served from a browser cache
    response = await call_next(request)
    if response.headers.get("content-type", "").startswith("application/json"):
        response.headers.setdefault("Cache-Control", "no-store")
    return response

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
