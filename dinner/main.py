import logging

import uvicorn
from dinner.api.api_run import app
from dinner.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


def _endpoint_lines():
    for route in app.routes:
        methods = sorted(getattr(route, "methods", None) or [])
        if route.path.startswith("/api"):
            yield f"  {'/'.join(methods):<7} {route.path}"


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Dinner Time server running at http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    print("API Endpoints:")
    for line in _endpoint_lines():
        print(line)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
