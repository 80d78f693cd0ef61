#!/usr/bin/env python3
"""
Launch the Builder Maps API server.

ENV=production binds all interfaces on port 3004 without auto-reload;
otherwise the server listens on localhost:8000 and reloads on changes.
HOST, PORT and LOG_LEVEL override those defaults.  The catalog location
and duplicate rules come from BUILDER_MAPS_DATA_DIR and
BUILDER_MAPS_DEDUP_CONFIG, read by the app itself.
"""
import os

import uvicorn


def main() -> None:
    production = os.environ.get("ENV") == "production"
    uvicorn.run(
        "platform_api.app:app",
        host=os.environ.get("HOST", "0.0.0.0" if production else "127.0.0.1"),
        port=int(os.environ.get("PORT", 3004 if production else 8000)),
        log_level=os.environ.get("LOG_LEVEL", "info").lower(),
        reload=not production,
        reload_dirs=None if production else ["platform_api", "deduplication"],
    )


if __name__ == "__main__":
    main()
