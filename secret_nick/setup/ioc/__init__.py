from secret_nick.setup.ioc.providers import HandlerProvider

__all__ = ["HandlerProvider"]
