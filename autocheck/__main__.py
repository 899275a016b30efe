"""
Point d'entrée principal du backend FastAPI.

Usage:
    python -m autocheck      (ou la commande `autocheck` installée)

Charge le .env, valide la configuration puis lance uvicorn:
- STRIPE_SECRET_KEY, STRIPE_PUBLISHABLE_KEY, EMAIL_PASSWORD, FRONTEND_URL: obligatoires,
  sinon le process s'arrête avec le code 1 sans ouvrir de port
- PORT: port d'écoute (par défaut 3000)
- LOG_LEVEL: niveau de logs (critical, error, warning, info, debug); une autre valeur arrête le process (code 1)
"""
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from autocheck.app import create_app
from autocheck.config import ENV_PATH, load_settings
from autocheck.errors import ConfigError

logger = logging.getLogger("autocheck")


def main() -> None:
    load_dotenv(dotenv_path=ENV_PATH)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("Error: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
