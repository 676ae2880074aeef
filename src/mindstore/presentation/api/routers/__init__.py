from mindstore.presentation.api.routers.admin import router as admin_router

__all__ = ["admin_router"]
