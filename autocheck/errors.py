"""
Taxonomie des erreurs applicatives.
- ConfigError: fatale, levée uniquement au démarrage (exit 1).
- AppError et sous-classes: rendues en JSON {"error": message} par le handler d'exceptions.
  Le message est toujours sûr à exposer; la cause interne est seulement loggée.
"""


class ConfigError(Exception):
    """Configuration manquante ou invalide au démarrage."""


class AppError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class MissingFields(AppError):
    status_code = 400
    message = "Missing required fields"


class InvalidURL(AppError):
    status_code = 400
    message = "Invalid URL format"


class MissingSessionId(AppError):
    status_code = 400
    message = "Session ID is required"


class GatewayError(AppError):
    status_code = 500
    message = "Payment gateway error"


class MailError(AppError):
    status_code = 500
    message = "Failed to send confirmation emails"
