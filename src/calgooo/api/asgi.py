"""ASGI entrypoint for the Calgooo API."""

import uvicorn

from calgooo.api.app import create_app
from calgooo.containers import build_container

container = build_container()
app = create_app(container)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=container.settings.host, port=container.settings.port)


if __name__ == "__main__":
    run()
