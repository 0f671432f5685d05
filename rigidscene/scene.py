"""Scenes: sets of rigid bodies loaded from a scene directory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rigidscene.modelloader import ModelLoader, get_instance
from rigidscene.rigidbody import RigidBody2D

DEFAULT_SCENE_PATH = "resources/testScenes/scene1"


class Scene:
    """A numbered scene whose bodies come from a model directory."""

    def __init__(
        self,
        scene_id: int,
        scene_path: str | Path = DEFAULT_SCENE_PATH,
        loader: ModelLoader | None = None,
    ) -> None:
        self.scene_id = scene_id
        self.scene_path = scene_path
        self.scene_paths: dict[int, str | Path] = {}
        self.bodies: list[RigidBody2D] = []
        self._loader = loader if loader is not None else get_instance()

    def populate_paths(self) -> None:
        """Register this scene's directory under its id."""
        self.scene_paths[self.scene_id] = self.scene_path

    def init(self) -> list[RigidBody2D]:
        """Load the bodies of a registered scene; nothing if unregistered."""
        if self.scene_id in self.scene_paths:
            self.bodies.extend(self._loader.load_models(self.scene_paths[self.scene_id]))
        return self.bodies


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rigidscene", description="Load the rigid bodies of a scene."
    )
    parser.add_argument("path", nargs="?", help="directory of model files")
    args = parser.parse_args(argv)

    bodies: list[RigidBody2D] = []
    if args.path is not None:
        try:
            bodies = get_instance().load_models(args.path)
        except NotADirectoryError as exc:
            print(exc, file=sys.stderr)
            return 1
    for body in bodies:
        print(body.id)
    return 0


if __name__ == "__main__":
    sys.exit(main())