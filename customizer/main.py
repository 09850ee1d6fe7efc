from customizer.api.main import app

__all__ = ["app"]
