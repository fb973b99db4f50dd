"""
FastAPI application setup for the repo-intake Web UI.
"""

from dotenv import load_dotenv
from fastapi import FastAPI

from . import __version__ as WEB_VERSION
from .routes import router

# Load .env file (if present) so REPO_INTAKE_* settings are available via os.environ
load_dotenv()

# App
app = FastAPI(
    title="repo-intake",
    description="Validate, trust and add existing local Git repositories",
    version=WEB_VERSION,
)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness/readiness probe endpoint."""
    return {"status": "ok"}
