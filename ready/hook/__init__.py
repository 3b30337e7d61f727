from .installer import HOOK_PATH, HOOK_SCRIPT, HookError, install_hook

__all__ = ["HOOK_PATH", "HOOK_SCRIPT", "HookError", "install_hook"]
