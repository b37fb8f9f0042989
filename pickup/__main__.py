import uvicorn

from pickup.main import app, settings

if __name__ == "__main__":
    # Logging is already configured by pickup.main
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=settings.access_log,
    )
