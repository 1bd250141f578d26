"""Run the reconciler with uvicorn: ``python -m hedera_recon``."""

import uvicorn

from hedera_recon.config import settings


def run() -> None:
    uvicorn.run(
        "hedera_recon.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
