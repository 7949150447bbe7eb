import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from mangum import Mangum
from api.errors import register_error_handlers
from api.worker_routes import router as worker_router
from config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Worker Roster API",
    description="CRUD API for migrant-labor worker records",
    version="1.0.0",
    root_path=settings.ROOT_PATH,
    docs_url="/api-docs",
    redoc_url=None,
    openapi_tags=[
        {"name": "Init", "description": "Liveness"},
        {"name": "Workers", "description": "Worker records"},
    ],
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(worker_router, tags=["Workers"])


@app.get("/", response_class=PlainTextResponse, tags=["Init"], summary="Returns a hello world message")
async def hello():
    """Liveness probe"""
    return "hello world"


@app.get("/health", tags=["Init"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    }


# Lambda handler
handler = Mangum(app, lifespan="off")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"server running at http://localhost:{settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
