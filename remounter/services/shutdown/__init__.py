from .shutdown_controller import ShutdownController, ShutdownToken

__all__ = ["ShutdownController", "ShutdownToken"]
