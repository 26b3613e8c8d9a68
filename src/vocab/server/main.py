"""
Vocabulary Trainer API Server.

Run with: uvicorn vocab.server.main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.routing import APIRoute

from vocab.server.routes import quiz, settings, vocables


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        logger.info("  %-8s %-40s → %s", methods, path, name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_routes(app)
    yield


app = FastAPI(title="Vocabulary Trainer API", lifespan=lifespan)

app.include_router(vocables.router)
app.include_router(quiz.router)
app.include_router(settings.router)


@app.get("/")
async def root():
    return {"name": "Vocabulary Trainer API", "version": "0.1.0"}
