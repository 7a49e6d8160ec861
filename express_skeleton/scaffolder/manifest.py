"""``package.json`` assembly for the generated project.

:class:`PackageManifest` is built incrementally as features and routers are
selected, then finalized once: :meth:`PackageManifest.finalized` sorts the
runtime dependencies the way npm(1) does and :meth:`PackageManifest.to_json`
produces the text written to disk.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

BASELINE_SCRIPTS: dict[str, str] = {
    "start": "NODE_ENV=production node server.js",
    "dev": "nodemon server.js",
    "lint": "eslint . --ext .js",
    "lint:fix": "eslint --fix . --ext .js",
    "test": 'echo "Error: no test specified" && exit 1',
}

BASELINE_DEPENDENCIES: dict[str, str] = {
    "chalk": "^2.4.1",
    "express": "^4.16.4",
}

BASELINE_DEV_DEPENDENCIES: dict[str, str] = {
    "eslint": "^5.10.0",
    "eslint-config-airbnb-base": "^13.1.0",
    "eslint-config-prettier": "^3.3.0",
    "eslint-plugin-import": "^2.14.0",
    "eslint-plugin-node": "^8.0.0",
    "eslint-plugin-prettier": "^3.0.0",
    "nodemon": "^1.18.8",
    "prettier": "^1.15.3",
}


class PackageManifest(BaseModel):
    """The generated project's package descriptor.

    Instances are immutable; the ``with_*`` methods return updated copies.
    Field order is the key order of the serialized file.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str = "0.0.0"
    private: bool = True
    main: str = "server.js"
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    # -- Builders ----------------------------------------------------------

    def with_script(self, name: str, command: str) -> PackageManifest:
        return self.model_copy(update={"scripts": {**self.scripts, name: command}})

    def with_dependency(self, package: str, version_range: str) -> PackageManifest:
        return self.model_copy(
            update={"dependencies": {**self.dependencies, package: version_range}}
        )

    def with_dev_dependency(self, package: str, version_range: str) -> PackageManifest:
        return self.model_copy(
            update={"dev_dependencies": {**self.dev_dependencies, package: version_range}}
        )

    # -- Finalization ------------------------------------------------------

    def finalized(self) -> PackageManifest:
        """Return a copy whose ``dependencies`` keys are in lexicographic order.

        ``scripts`` and ``devDependencies`` keep their insertion order.
        """
        return self.model_copy(
            update={"dependencies": dict(sorted(self.dependencies.items()))}
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Serialize with 2-space indentation and a single trailing newline."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"


def baseline_manifest(name: str) -> PackageManifest:
    """Return the manifest every generated project starts from."""
    return PackageManifest(
        name=name,
        scripts=dict(BASELINE_SCRIPTS),
        dependencies=dict(BASELINE_DEPENDENCIES),
        dev_dependencies=dict(BASELINE_DEV_DEPENDENCIES),
    )
