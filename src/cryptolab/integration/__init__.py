# Integration Module
"""
Glue between the cipher engine and its callers:
- Algorithm registry and raw form-input dispatch - registry.py
- Console rendering of outcomes for the demos - console.py
"""

# Lazy imports so the engine does not pull in rich unless something renders
def __getattr__(name):
    """Lazy import of the integration submodules."""
    if name in ('render_trace', 'render_outcome', 'print_outcome'):
        from . import console
        return getattr(console, name)
    from . import registry
    return getattr(registry, name)

__all__ = [
    'Algorithm',
    'ALGORITHMS',
    'get_algorithm',
    'run',
    'render_trace',
    'render_outcome',
    'print_outcome',
]
