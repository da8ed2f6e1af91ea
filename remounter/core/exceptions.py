# remounter/core/exceptions.py


class RemounterError(Exception):
    """Base class for errors raised by the remounter."""


class ResolutionError(RemounterError):
    """Raised when the monitored hostname cannot be resolved to any address."""

    def __init__(self, hostname: str, detail: str = "Could not resolve to any addresses"):
        self.hostname = hostname
        self.detail = detail
        super().__init__(f"Failed to resolve {hostname!r}: {detail}")


class MountInvocationError(RemounterError):
    """Raised when the mount command itself cannot be started."""

    def __init__(self, command: str, cause: BaseException):
        self.command = command
        super().__init__(f"Could not execute mount command {command!r}: {cause}")


class HookInvocationError(RemounterError):
    """Raised when the shell for the post-mount script cannot be started."""

    def __init__(self, command: str, cause: BaseException):
        self.command = command
        super().__init__(f"Could not execute post-mount script {command!r}: {cause}")
