"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn secret_nick.main:app --host 0.0.0.0 --port 5001 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from secret_nick.config.settings import Config

if __name__ == "__main__":
    debug = Config.APP_ENV == "development"

    print(f"Starting FastAPI application in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "secret_nick.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
