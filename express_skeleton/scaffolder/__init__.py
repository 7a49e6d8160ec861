"""express-skeleton scaffolder -- materializes an Express server project.

Takes a destination path and renders the fixed template set into it:
``server.js``, a generated ``app.js``, ``config/`` and ``routers/`` modules,
lint and format configs, and a ``package.json`` with sorted dependencies.

Quick usage::

    from express_skeleton.scaffolder import ApplicationGenerator, GenerationContext

    context = GenerationContext.from_destination("/tmp/my-app", force=True)
    status = await ApplicationGenerator(context).run()
"""

from .binding import Mount, TemplateBinding
from .emitter import FileEmitter, is_empty_directory
from .features import Feature, Router, apply_feature, mount_router
from .generator import ApplicationGenerator, GenerationContext, GeneratorState
from .manifest import PackageManifest, baseline_manifest
from .naming import create_app_name
from .templates import AppTemplate, TemplateRenderer, inspect_literal

__all__ = [
    "AppTemplate",
    "ApplicationGenerator",
    "Feature",
    "FileEmitter",
    "GenerationContext",
    "GeneratorState",
    "Mount",
    "PackageManifest",
    "Router",
    "TemplateBinding",
    "TemplateRenderer",
    "apply_feature",
    "baseline_manifest",
    "create_app_name",
    "inspect_literal",
    "is_empty_directory",
    "mount_router",
]
