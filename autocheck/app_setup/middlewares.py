"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS ouvert (toutes origines, GET/POST, Content-Type).
- register_security_middleware: en-têtes de sécurité par défaut (équivalent helmet) + CSP.
Notes:
- Les en-têtes déjà posés par une vue ne sont pas écrasés (setdefault), sauf la CSP.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

CORS_ORIGINS = ["*"]
CORS_METHODS = ["GET", "POST"]
CORS_HEADERS = ["Content-Type"]

SECURITY_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

CSP = (
    "default-src 'self'; "
    "base-uri 'self'; font-src 'self' https: data:; form-action 'self'; "
    "frame-ancestors 'self'; img-src 'self' data:; object-src 'none'; "
    "script-src 'self'; script-src-attr 'none'; "
    "style-src 'self' https: 'unsafe-inline'; upgrade-insecure-requests"
)


def register_basic_middlewares(app: FastAPI) -> None:
    """
    CORSMiddleware: API publique appelée par le front (origine quelconque), sans cookies.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )


def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        response.headers["Content-Security-Policy"] = CSP

        return response
