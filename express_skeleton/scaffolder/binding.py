"""Template bindings for the generated application module.

A :class:`TemplateBinding` is the set of names visible to ``app.js.j2``.
It is immutable: every registration returns a new binding, so the order in
which modules, middleware and routers were registered is explicit in the
code that builds it.  That order is preserved into the rendered file, where
it decides middleware and router precedence.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Mount(BaseModel):
    """A router mounted under a URL path prefix."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="URL path prefix, e.g. '/user'")
    code: str = Field(..., description="Identifier of the router in the generated module")


class TemplateBinding(BaseModel):
    """Names visible to the application template."""

    model_config = ConfigDict(frozen=True)

    local_modules: dict[str, str] = Field(
        default_factory=dict,
        description="Identifier -> relative module path, in registration order",
    )
    modules: dict[str, str] = Field(
        default_factory=dict,
        description="Identifier -> external package name, in registration order",
    )
    mounts: tuple[Mount, ...] = Field(default=())
    uses: tuple[str, ...] = Field(
        default=(),
        description="Middleware expressions, injected verbatim",
    )

    # -- Registration ------------------------------------------------------

    def with_module(self, identifier: str, package: str) -> TemplateBinding:
        return self.model_copy(update={"modules": {**self.modules, identifier: package}})

    def with_local_module(self, identifier: str, path: str) -> TemplateBinding:
        return self.model_copy(
            update={"local_modules": {**self.local_modules, identifier: path}}
        )

    def with_use(self, expression: str) -> TemplateBinding:
        return self.model_copy(update={"uses": (*self.uses, expression)})

    def with_mount(self, path: str, code: str) -> TemplateBinding:
        mount = Mount(path=path, code=code)
        return self.model_copy(update={"mounts": (*self.mounts, mount)})

    # -- Rendering ---------------------------------------------------------

    def as_context(self) -> dict[str, Any]:
        """Return the mapping handed to the template engine."""
        return {
            "local_modules": dict(self.local_modules),
            "modules": dict(self.modules),
            "mounts": list(self.mounts),
            "uses": list(self.uses),
        }
