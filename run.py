# =============================================================================
# run.py — Start the generation API with uvicorn
# =============================================================================
# Usage: python run.py
# API: http://127.0.0.1:8000/api/generate (POST)
# =============================================================================

import os

import uvicorn

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))


def main():
    print(f"Starting promogen API on http://{HOST}:{PORT} ...")
    uvicorn.run("promogen.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
