"""Option loading and resolution.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_options`
    3. Options passed directly to :func:`resolve_options`
"""

from .schema import PuncOptions, RunConfiguration, load_options, resolve_options

__all__ = ["PuncOptions", "RunConfiguration", "load_options", "resolve_options"]
