"""
Production ASGI entry point.

    uvicorn secret_nick.main:app --host 0.0.0.0 --port 5001
"""

from secret_nick.config.logging_config import setup_logging
from secret_nick.config.settings import Config
from secret_nick.fastapi_app import create_fastapi_app
from secret_nick.setup.ioc.container import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

# Create container at module level (before app starts)
# Dishka adds middleware, which must happen before the app starts
container = create_container()

app = create_fastapi_app(container)
