# miniblog/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from miniblog.config import settings
from miniblog.core.db import init_db, close_db
from miniblog.api.errors import register_error_handlers
from miniblog.api.v1.routers import auth, posts, comments

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

register_error_handlers(app)

@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.generate_schemas)
    logger.info("[db] connected (env=%s)", settings.env)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(posts.router, prefix="/api/v1")
app.include_router(comments.router, prefix="/api/v1")
app.include_router(comments.my_router, prefix="/api/v1")

@app.get("/healthz")
def healthz():
    return {"ok": True}
