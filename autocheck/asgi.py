"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn -k uvicorn.workers.UvicornWorker) importe `autocheck.asgi:app`.
- La configuration est validée à l'import: un environnement invalide arrête le process (code 1).
"""
import logging
import sys

from dotenv import load_dotenv

from autocheck.app import create_app
from autocheck.config import ENV_PATH
from autocheck.errors import ConfigError

load_dotenv(dotenv_path=ENV_PATH)

try:
    app = create_app()
except ConfigError as e:
    logging.getLogger("uvicorn.error").error("Error: %s", e)
    sys.exit(1)
