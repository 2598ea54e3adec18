"""inject-define-options: name Vue components after their routes.

Reads a TypeScript route file, finds every route whose component is
lazily imported from "@/views/", and injects (or overrides)
`defineOptions({ name: "<RouteName>" })` in the matching .vue file.

This package provides:
- Route extraction from TypeScript (tree-sitter)
- Surgical <script> patching for Vue single-file components
- A Typer CLI (inject-define-options)
- Testing utilities (FakeReporter)
"""

from inject_define_options.config import InjectConfig
from inject_define_options.injector import inject_define_options
from inject_define_options.models import MatchedRoute, PatchOutcome
from inject_define_options.reporting import ConsoleReporter, Reporter
from inject_define_options.testing import FakeReporter
from inject_define_options.ts.routes import extract_routes, extract_routes_from_file
from inject_define_options.vue.patcher import patch_component, patch_components, patch_source

__all__ = [
    # Configuration
    "InjectConfig",
    "inject_define_options",
    # Route extraction
    "MatchedRoute",
    "extract_routes",
    "extract_routes_from_file",
    # Component patching
    "PatchOutcome",
    "patch_component",
    "patch_components",
    "patch_source",
    # Reporting
    "ConsoleReporter",
    "Reporter",
    # Testing
    "FakeReporter",
]
__version__ = "0.1.0"
