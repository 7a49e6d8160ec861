"""Optional application features and router mounts.

A :class:`Feature` couples a runtime middleware registration with the
package it needs, so the application template and ``package.json`` can never
drift apart: :func:`apply_feature` always updates both.  Body parsers are
Express built-ins and carry no dependency.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .binding import TemplateBinding
from .manifest import PackageManifest


class Feature(BaseModel):
    """A middleware registration and the dependency backing it."""

    model_config = ConfigDict(frozen=True)

    name: str
    use: str = Field(..., description="Expression passed to app.use()")
    module: tuple[str, str] | None = Field(
        default=None, description="(identifier, package) to require"
    )
    dependency: tuple[str, str] | None = Field(
        default=None, description="(package, semver range) for package.json"
    )


class Router(BaseModel):
    """A local router module mounted under a URL prefix."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Identifier of the router in app.js")
    module: str = Field(..., description="Relative require() path")
    path: str = Field(..., description="Mount path")


REQUEST_LOGGER = Feature(
    name="logger",
    module=("logger", "morgan"),
    use="logger('dev')",
    dependency=("morgan", "^1.9.1"),
)
JSON_PARSER = Feature(name="json", use="express.json()")
URLENCODED_PARSER = Feature(name="urlencoded", use="express.urlencoded({ extended: true })")

DEFAULT_FEATURES: tuple[Feature, ...] = (REQUEST_LOGGER, JSON_PARSER, URLENCODED_PARSER)

INDEX_ROUTER = Router(code="indexRouter", module="./routers/index", path="/")
USER_ROUTER = Router(code="userRouter", module="./routers/user", path="/user")

DEFAULT_ROUTERS: tuple[Router, ...] = (INDEX_ROUTER, USER_ROUTER)


def apply_feature(
    binding: TemplateBinding, manifest: PackageManifest, feature: Feature
) -> tuple[TemplateBinding, PackageManifest]:
    """Register *feature* in both the binding and the manifest."""
    if feature.module is not None:
        binding = binding.with_module(*feature.module)
    binding = binding.with_use(feature.use)
    if feature.dependency is not None:
        manifest = manifest.with_dependency(*feature.dependency)
    return binding, manifest


def mount_router(binding: TemplateBinding, router: Router) -> TemplateBinding:
    """Require *router* as a local module and mount it at its path."""
    return binding.with_local_module(router.code, router.module).with_mount(
        router.path, router.code
    )
