import sys
from flask import Flask

from facehash.api.routes import bp as api_bp

DEFAULTS = {
    "PALETTE": "default",
    "MAX_BATCH": 100,
}

def create_app(config=None):
    app = Flask(__name__)
    app.config.update(DEFAULTS)
    # FACEHASH_PALETTE=dark, FACEHASH_MAX_BATCH=500 ...
    app.config.from_prefixed_env("FACEHASH")
    if config:
        app.config.update(config)
    app.register_blueprint(api_bp)
    return app

app = create_app()

if __name__ == "__main__":
    port = 5000
    if "--port" in sys.argv:
        try:
            i = sys.argv.index("--port")
            port = int(sys.argv[i+1])
        except (IndexError, ValueError):
            print("[Facehash] bad --port, using 5000")
    print(f"[Facehash] running at http://0.0.0.0:{port}")
    app.run(host="0.0.0.0", port=port, debug=False)
