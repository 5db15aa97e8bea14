"""
Server entry point: `python -m bearbrain_api`.

Reads HOST, PORT and RELOAD from the environment.
"""

import os

import uvicorn
from dotenv import load_dotenv

if __name__ == "__main__":
    load_dotenv()

    port = int(os.environ.get("PORT", 3000))
    host = os.environ.get("HOST", "0.0.0.0")
    reload = os.environ.get("RELOAD", "false").lower() == "true"

    uvicorn.run("bearbrain_api.main:app", host=host, port=port, reload=reload)
