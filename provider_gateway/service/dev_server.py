"""Development server entry point (``python -m provider_gateway.service.dev_server``)."""

from __future__ import annotations

import os

import uvicorn

from ..config.defaults import SERVICE_DEFAULT_HOST, SERVICE_DEFAULT_PORT


def main() -> None:
    host = os.getenv("GATEWAY_SERVICE_HOST", SERVICE_DEFAULT_HOST)
    port = int(os.getenv("GATEWAY_SERVICE_PORT", str(SERVICE_DEFAULT_PORT)))
    uvicorn.run("provider_gateway.service.app:app", host=host, port=port, reload=False)


if __name__ == "__main__":  # pragma: no cover
    main()
