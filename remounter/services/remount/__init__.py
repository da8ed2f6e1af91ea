from .hook_runner import HookRunner
from .remount_orchestrator import RemountOrchestrator

__all__ = ["HookRunner", "RemountOrchestrator"]
