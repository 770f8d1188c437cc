"""Deploy lifecycle hooks."""

from bindhook.presentation.hooks.predeploy import BindDecoratorHook

__all__ = ["BindDecoratorHook"]
