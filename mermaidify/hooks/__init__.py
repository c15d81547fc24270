from .registry import HookRegistry, hooks, install

__all__ = ["HookRegistry", "hooks", "install"]
