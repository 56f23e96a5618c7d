"""UAS entrypoint.

Run with:
  python -m uas
"""

import os
import uvicorn

def main() -> None:
    host = os.getenv("UAS_HOST", "0.0.0.0")
    port = int(os.getenv("UAS_PORT", "8000"))
    reload = os.getenv("UAS_RELOAD", "false").lower() in {"1", "true", "yes", "y"}
    uvicorn.run("uas.app:app", host=host, port=port, reload=reload)

if __name__ == "__main__":
    main()
