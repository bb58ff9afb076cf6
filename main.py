from fastapi import FastAPI
from contextlib import asynccontextmanager
from totl.config import APP_TITLE
from totl.database import create_db_and_tables
from totl.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: logging and database tables
    setup_logging()
    create_db_and_tables()
    yield


# Initialize FastAPI app
app = FastAPI(
    title=APP_TITLE,
    description="Weekly football predictions, mini-leagues and leaderboards",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
from totl.routers import leagues, leaderboard

app.include_router(leagues.router, tags=["leagues"])
app.include_router(leaderboard.router, tags=["leaderboard"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
