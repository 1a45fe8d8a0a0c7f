import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.db import Base, engine
from .core.config import get_settings
from .api import schedule, branches
from . import models  # noqa: F401

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.app_name)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(schedule.router, prefix="/api/schedule", tags=["schedule"])
app.include_router(branches.router, prefix="/api/branches", tags=["branches"])


@app.get("/health")
def health():
    return {"status": "ok"}
