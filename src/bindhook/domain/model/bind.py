"""Fixed names of the @bind rewrite.

None of these are configurable: the rewritten code must match the
runtime helper shipped in the c/signals module.
"""

TARGET_DECORATOR = "bind"
"""Decorator name token that marks an occurrence of interest."""

SIGNALS_MODULE = "c/signals"
"""Module path the bind helper is imported from."""

BIND_BINDING = "bind"
"""Local binding name the rewritten initializer calls."""

BIND_IMPORT = f'import {{ {BIND_BINDING} }} from "{SIGNALS_MODULE}";'

SELF_REFERENCE = "this"

LWC_BUNDLE_KIND = "LightningComponentBundle"


def replacement_code(property_name: str, argument_name: str) -> str:
    """Render the initializer that replaces a decorated field.

    Example:
        >>> replacement_code("count", "counter")
        'count = bind(this, "count").to(counter)'
    """
    return (
        f'{property_name} = {BIND_BINDING}({SELF_REFERENCE}, "{property_name}")'
        f".to({argument_name})"
    )
