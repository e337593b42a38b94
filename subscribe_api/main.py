import logging
from fastapi import FastAPI

from subscribe_api.api.routes import router as api_router   # single combined router
from subscribe_api.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Subscribe API", version="1.0.0")

# CORS headers are set per response in routes.py (allow-list from CORS_ALLOW_ORIGIN),
# so no CORSMiddleware here; it would answer OPTIONS before our handler does.
app.include_router(api_router)
