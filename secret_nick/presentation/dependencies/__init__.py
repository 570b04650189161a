"""FastAPI dependencies shared by routers."""

from secret_nick.presentation.dependencies.user_code import get_user_code

__all__ = ["get_user_code"]
