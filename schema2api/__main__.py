import logging

import uvicorn

from . import config
from .main import app

LOG = logging.getLogger("schema2api.http")


def main():
    LOG.info(f"Server started on port :{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
