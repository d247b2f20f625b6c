import logging
from contextlib import asynccontextmanager

from app import config

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from app.api import deps  # noqa: E402
from app.api.base import api_router  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # The timer's tick task must not outlive the app
    await deps.shutdown()


app = FastAPI(
    title="MoodFlow Backend API",
    description="Mood-based study companion: playlists, Pomodoro timer and session tracking",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Specify your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": "MoodFlow Backend API",
        "docs": "/docs",
        "version": "1.0.0"
    }
