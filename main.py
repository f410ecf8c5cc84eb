"""Simple entrypoint to run CoutureMind locally."""

import uvicorn

from couture_app.config import StylistConfig


def main() -> None:
    config = StylistConfig.from_env()
    uvicorn.run("server.api:app", host=config.host, port=config.port, reload=False)


if __name__ == "__main__":
    main()
