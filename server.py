"""Launch the codejudge HTTP API with uvicorn.

ENV=dev (default) binds to localhost with autoreload; anything else binds to
all interfaces for container deployments. PORT is honoured when the host
platform injects it.
"""
import os
import uvicorn

if __name__ == "__main__":
    dev = os.environ.get("ENV", "dev") == "dev"
    port = int(os.environ.get("PORT", 8000))
    log_level = os.environ.get("LOG_LEVEL", "INFO").lower()

    if dev:
        # Local dev with reload; the UI dev server calls this from localhost:5173
        uvicorn.run("codejudge.main:app", host="127.0.0.1", port=port, reload=True, log_level=log_level)
    else:
        # Production – no reload, bind to all interfaces
        uvicorn.run("codejudge.main:app", host="0.0.0.0", port=port, log_level=log_level)
