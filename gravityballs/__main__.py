"""
Serve the simulation API:
    python -m gravityballs
"""

import os

import uvicorn

APP_IMPORT_PATH = "gravityballs.main:app"


def main() -> None:
    uvicorn.run(
        APP_IMPORT_PATH,
        host=os.getenv("GRAVITY_HOST", "127.0.0.1"),
        port=int(os.getenv("GRAVITY_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
