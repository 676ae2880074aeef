from mindstore.application.context.user_context import CallerContext

__all__ = ["CallerContext"]
