"""
Name: ASGI Entrypoint (app.main)

Responsibilities:
  - Re-export the FastAPI app for ASGI servers and tooling
  - Run uvicorn on the configured PORT when executed as a script

Collaborators:
  - app.api.main: module that constructs and exposes the FastAPI app
  - uvicorn, configured to import app.main:app

Notes/Constraints:
  - No business logic here; keep it thin and predictable
"""

from app.api.main import app

__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn

    from app.crosscutting.config import get_settings

    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().port)
