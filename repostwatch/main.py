import uvicorn

from repostwatch.api.app import create_app
from repostwatch.config.settings import Settings
from repostwatch.logging.logger import Log
from repostwatch.processor.processor import build_processor


def main() -> None:
    """Entry point: load settings -> build dependencies -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    processor = build_processor(settings)
    app = create_app(settings, processor=processor)
    Log.info(f"Serving repostwatch on {settings.host}:{settings.port} ({settings.app_env})")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
