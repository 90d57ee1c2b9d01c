"""
Development server for the HTTP API.

Usage:
    python app.py            # http://localhost:5000
    flask --app app run
"""

import os

from scriptstyle.api import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
