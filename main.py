"""Simple entrypoint to run the Wearorithm API locally."""

import uvicorn

from wearorithm_app.config import WearorithmConfig


def main() -> None:
    config = WearorithmConfig.from_env()
    uvicorn.run("server.api:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
