"""express-skeleton configuration.

Typed settings for the generator.  Like the rest of the package the
settings are a Pydantic v2 model, so they are validated at construction time
and can be overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


class ScaffoldConfig(BaseModel):
    """Settings shared by every component of one generator run.

    Instances are normally created once by the CLI entry point and passed to
    :class:`~express_skeleton.scaffolder.ApplicationGenerator`.
    """

    template_dir: Path = Field(
        default=DEFAULT_TEMPLATE_DIR,
        description="Directory holding the static and rendered template set",
    )
    default_app_name: str = Field(
        default="node-skeleton",
        min_length=1,
        description="Package name used when the destination yields an empty name",
    )
    dir_mode: int = Field(default=0o755, ge=0, le=0o7777)
    file_mode: int = Field(default=0o666, ge=0, le=0o7777)
    config_glob: str = Field(default="*.js", description="Files copied into config/")
    router_glob: str = Field(default="*.js", description="Files copied into routers/")

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SKELETON_TEMPLATE_DIR, SKELETON_DEFAULT_APP_NAME.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SKELETON_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["SKELETON_TEMPLATE_DIR"])
        if os.environ.get("SKELETON_DEFAULT_APP_NAME"):
            kwargs["default_app_name"] = os.environ["SKELETON_DEFAULT_APP_NAME"]
        return cls(**kwargs)
