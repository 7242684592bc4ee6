# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.db import init_db, close_db
from app.core.bootstrap import ensure_default_admin
from app.core.exceptions import ContentError, content_error_handler

from app.api.v1.routers import auth, posts, wiki, markdown, admin

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ValidationError / ConflictError / NotFoundError / UnauthorizedError -> 4xx
app.add_exception_handler(ContentError, content_error_handler)

@app.on_event("startup")
async def on_startup():
    await init_db()
    # Ensure there's an admin account on first run
    await ensure_default_admin()
    logger.info("[startup] %s ready (env=%s, content backend=%s)",
                settings.APP_NAME, settings.env, settings.content_backend)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(posts.router, prefix="/api/v1")
app.include_router(wiki.router, prefix="/api/v1")
app.include_router(markdown.router, prefix="/api/v1")
app.include_router(admin.router, prefix="/api/v1")

@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
