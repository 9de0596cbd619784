from src.briefdesk.core.security.headers import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware"]
