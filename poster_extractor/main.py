import logging
from typing import Callable

from fastapi import Depends, FastAPI

from poster_extractor import api, ui
from poster_extractor.adapters import VisionAdapter
from poster_extractor.config import EXTRACTOR_PROVIDER, HOST, LOG_LEVEL, PORT
from poster_extractor.dependencies import get_adapter_loader
from poster_extractor.errors import ProviderNotConfigured

logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Band Poster Extractor", version="0.1.0")
    app.include_router(api.router)
    app.include_router(ui.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "provider": EXTRACTOR_PROVIDER}

    @app.get("/ready")
    async def ready(
        load_adapter: Callable[[], VisionAdapter] = Depends(get_adapter_loader),
    ):
        try:
            adapter = load_adapter()
        except ProviderNotConfigured as e:
            return {"ready": False, "detail": str(e)}
        return {"ready": await adapter.is_available()}

    return app


app = create_app()


def main():
    """Entry point for the extraction server."""
    import uvicorn

    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
