import os
import time
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from src.config import Config, logger
from src.data.repositories import init_db
from src.errors import register_exception_handlers
from src.presentation.routes import (
    leetcode_router,
    problem_router,
    stats_router,
    study_session_router,
    transfer_router,
)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        client_host = request.client.host if request.client else "unknown"
        logger.info(
            f"Request started: {request.method} {request.url.path} - "
            f"ID: {request_id} - Client: {client_host}"
        )
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            logger.info(
                f"Request completed: {request.method} {request.url.path} - "
                f"ID: {request_id} - Status: {response.status_code} - "
                f"Time: {process_time:.4f}s"
            )
            return response
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} - "
                f"ID: {request_id} - Error: {e} - "
                f"Time: {process_time:.4f}s"
            )
            raise


@asynccontextmanager
async def life_span(app: FastAPI):
    logger.info("Server is starting...")
    if os.environ.get("TESTING") != "True":
        try:
            await init_db()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise
    else:
        logger.info("Skipping database initialization for tests")
    yield
    logger.info("Server has been stopped")


version = "v1"

app = FastAPI(
    title="Practice Tracker API",
    description="Tracks coding problems, solutions and study sessions, with filtering and progress statistics",
    version=version,
    lifespan=life_span,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

register_exception_handlers(app)

app.include_router(problem_router,       prefix=f"/api/{version}")
app.include_router(study_session_router, prefix=f"/api/{version}")
app.include_router(stats_router,         prefix=f"/api/{version}")
app.include_router(transfer_router,      prefix=f"/api/{version}")
app.include_router(leetcode_router,      prefix=f"/api/{version}")


@app.get(f"/api/{version}/hello", tags=["health"])
async def hello():
    return {"message": "Hello from backend!"}


logger.info(f"Application startup complete - API version: {version}")


if __name__ == "__main__":
    uvicorn.run(app, host=Config.API_SERVER_HOST, port=Config.API_SERVER_PORT)
