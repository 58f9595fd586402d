from __future__ import annotations
import os

from app import create_app

app = create_app()

if __name__ == "__main__":
	# Run development server (no reloader to avoid double-spawn on Windows tasks)
	port = int(os.getenv("PORT", "5000"))
	app.run(host="127.0.0.1", port=port, debug=False, use_reloader=False, threaded=True)
