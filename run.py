"""Entrypoint that starts the greeting service on the port read from PORT."""
from app.config import settings
from app.server import start

if __name__ == "__main__":
    start(settings.port)
