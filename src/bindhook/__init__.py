"""bindhook - pre-deploy rewriter for the LWC @bind field decorator."""

__version__ = "0.1.0"

from bindhook.application.services.cycle import DeployCycle
from bindhook.application.services.transformer import BindTransformer
from bindhook.presentation.hooks.predeploy import BindDecoratorHook

__all__ = ["BindDecoratorHook", "BindTransformer", "DeployCycle", "__version__"]
