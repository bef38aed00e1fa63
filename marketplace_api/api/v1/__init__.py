from .users_controller import router as users_router


__all__ = ["users_router"]
