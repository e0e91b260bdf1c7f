from pathlib import Path

import pytest

from docxref.build_package_graph import build_package_graph
from docxref.package_graph import PackageGraph

CORE_YML = """\
### YamlMime:SymbolFile
library: shapes.core
package: shapes
summary: Core shapes. See [Shape].
items:
  - uid: shapes.core.Shape
    kind: class
    abstract: true
    summary: Base of every shape. Compare [Circle.area].
    signature: abstract class Shape
  - uid: shapes.core.Shape.area
    kind: method
    parent: shapes.core.Shape
    summary: Area of this [Shape].
    returns: double
  - uid: shapes.core.Shape.describe
    kind: method
    parent: shapes.core.Shape
    summary: Describes the shape using [area].
    parameters:
      - name: verbose
        type: bool
        summary: Whether to include [area] in the text.
  - uid: shapes.core.Shape.label
    kind: property
    parent: shapes.core.Shape
    type: String
    summary: Label of the shape.
  - uid: shapes.core.Shape._secret
    kind: method
    parent: shapes.core.Shape
  - uid: shapes.core.Circle
    kind: class
    superclass: shapes.core.Shape
    summary: A round [Shape] with a [radius]. Build one with [new Circle].
    signature: class Circle extends Shape
  - uid: shapes.core.Circle.Circle
    kind: constructor
    parent: shapes.core.Circle
    summary: Creates a circle.
    parameters:
      - name: radius
        type: double
  - uid: shapes.core.Circle.unit
    kind: constructor
    name: unit
    parent: shapes.core.Circle
    summary: The unit circle.
  - uid: shapes.core.Circle.radius
    kind: property
    parent: shapes.core.Circle
    final: true
    type: double
    summary: Radius of the circle.
  - uid: shapes.core.Circle.area
    kind: method
    parent: shapes.core.Circle
    summary: Uses [radius].
    returns: double
  - uid: shapes.core.Box
    kind: class
    typeParameters:
      - T
    summary: Holds a [T].
  - uid: shapes.core.Color
    kind: enum
    summary: Colors of a shape.
  - uid: shapes.core.Color.red
    kind: enum_value
    parent: shapes.core.Color
    summary: Red.
  - uid: shapes.core.Color.green
    kind: enum_value
    parent: shapes.core.Color
    deprecated: true
    summary: Green.
  - uid: shapes.core.ShapeTools
    kind: extension
    on: shapes.core.Shape
    summary: Helpers for [Shape].
  - uid: shapes.core.ShapeTools.scaled
    kind: method
    parent: shapes.core.ShapeTools
    summary: A scaled copy.
  - uid: shapes.core.makeShape
    kind: function
    summary: Creates a [Circle].
  - uid: shapes.core.defaultShape
    kind: property
    type: Shape
    summary: The shape used when none is given.
  - uid: shapes.core.size
    kind: getter
    name: size
    type: int
    summary: Size of the default shape.
  - uid: shapes.core.size=
    kind: setter
    name: size
    type: int
"""

UTIL_YML = """\
library: shapes.util
package: shapes
imports:
  - shapes.core
  - library: shapes.core
    prefix: core
items:
  - uid: shapes.util.Helper
    kind: class
    summary: See [Circle], [core.Circle] and [shapes.core].
  - uid: shapes.util.Helper.run
    kind: method
    parent: shapes.util.Helper
    summary: Runs [makeShape()] then [Circle.unit].
"""


def write_symbols(root: Path, files: dict[str, str]) -> Path:
    """Write symbol files named by ``files`` keys under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (root / name).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def symbols_dir(tmp_path: Path) -> Path:
    return write_symbols(
        tmp_path / "symbols", {"core.yml": CORE_YML, "util.yml": UTIL_YML}
    )


@pytest.fixture
def graph(symbols_dir: Path) -> PackageGraph:
    return build_package_graph(sorted(symbols_dir.glob("*.yml")))
