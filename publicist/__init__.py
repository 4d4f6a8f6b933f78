"""
Publicist: response DSL and publicize code generation for Go APIs.

Designs declare HTTP responses, resources and media types through the
functions of ``publicist.dsl``. The code generator then emits, for each
user type a design returns, the Go method copying the private struct
into its public counterpart.

Usage:
    from publicist import dsl, run, generate_publicizers, publicized_types

    def design():
        dsl.response("Created", lambda: dsl.status(201))

    run(design)
    print(generate_publicizers(publicized_types()))
"""

__version__ = "0.1.0"
__author__ = "Publicist Team"
__email__ = "publicist@example.com"

# Public API exports
from .eval import run
from .design import get_root
from .codegen import publicize_method, generate_publicizers, publicized_types
from .utils.config import get_config, PublicistConfig

__all__ = [
    "run",
    "get_root",
    "publicize_method",
    "generate_publicizers",
    "publicized_types",
    "get_config",
    "PublicistConfig",
]
