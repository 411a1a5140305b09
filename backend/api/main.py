"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
or:       python -m api.main
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.app import create_app
from services.provider import build_provider_context
from settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("map_relay")

# Fails with ConfigurationError when the API key is missing, before any socket is bound
provider = build_provider_context(settings)

app = create_app(
    provider,
    cors_origins=settings.CORS_ALLOW_ORIGINS,
    log_requests=settings.LOG_REQUESTS,
)


if __name__ == "__main__":
    import uvicorn

    logger.info("listening on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False)
