from __future__ import annotations

import os

from app import app  # serverless / gunicorn entry: "index:app"
from config import DEBUG, PORT

# =========================
# Run
# =========================
if __name__ == "__main__":
    # Local dev only.
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", PORT)), debug=DEBUG)
