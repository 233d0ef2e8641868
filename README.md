# xlab

Building blocks for drawing block diagrams of real-time control experiments.
The package covers named signal lines, a catalogue of block types and the
shapes block figures are drawn with. It also works out the geometry of the
connections between blocks: the arrow-headed band outlines and the simpler
five-segment arrows. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `xlab.line` provides `Line`, a named signal with an initial value in
  textual matrix form. The default is `"[0]"`. `Line.full_name()` returns
  the name under which the line is handed to blocks.
  `is_valid_init_value()` currently accepts every string.
- `xlab.blockregistry` provides `BlockRegistry`, which maps a block type to
  its real-time flag, its id and its `DiagramType` shape.
  - Each registration takes the next id, counting from 0.
  - `load()` takes a mapping with `"Real-Time"` and `"Non Real-Time"`
    sections. A value starting with `t` or `T` means a triangle and one
    starting with `s` or `S` means a square. Any other value is ignored.
  - `all_rt()` and `all_nrt()` list the types in the order they were
    registered.
- `xlab.diagramitem` provides the following:
  - `DiagramType`, `Point` and `Rect`.
  - `polygon_for()`, which returns the closed outline for each shape.
  - `DiagramItem`, a block's figure. It keeps the figure's position, its
    bounding rectangle, its label text (`display_type()`) and its incoming
    and outgoing line paths. `entry_height()` spreads several incoming paths
    over the left edge of the block.
- `xlab.linepath` provides `LinePath`, the band-shaped outline drawn from the
  right edge of one item to the left edge of another, with an arrowhead at
  the end.
  - When the end item lies ahead, `zone1()` routes the band forward.
  - When the end item lies behind at a similar height (`is_zone2()`),
    `zone2()` loops the band around both items.
  - `update_position()` rebuilds `path` and places the name label at
    `text_pos`.
- `xlab.arrow` provides `Arrow`, a connector of five line segments with
  the same zone rules.
  - `update()` computes `parts`, `line`, `text_pos` and `arrow_head()`. It
    leaves them untouched while the two items overlap.
  - `bounding_rect()` grows the main line by a wide margin.

## Example

```python
from xlab.blockregistry import BlockRegistry
from xlab.diagramitem import DiagramItem, Point
from xlab.linepath import LinePath

registry = BlockRegistry()
registry.load({
    "Real-Time": {"gain": "square", "pid": "s"},
    "Non Real-Time": {"oscilloscope": "triangle"},
})
print(registry.all_rt())            # ['gain', 'pid']
print(registry.id_of("oscilloscope"))  # 2

gain = DiagramItem("gain", "gain1", registry.diag_of("gain"), Point(100, 200))
scope = DiagramItem("oscilloscope", "scope1", registry.diag_of("oscilloscope"), Point(500, 200))

path = LinePath(gain, scope, "output")
gain.add_line_path_out(path)
scope.add_line_path_in(path)
path.update_position()
print(path.is_zone2(), path.tip, path.text_pos)
```

## What the package does not do

The package describes diagram items and their connections. It does not do
the following:

- It has no model of the programs behind the blocks.
- It keeps no graph of a whole diagram and no root block.
- It does not build, start or stop anything.
- It reads and writes no project or configuration files. `BlockRegistry.load()`
  takes sections that have already been parsed.
- It has no window or canvas to draw on. It computes the coordinates, and
  painting them is up to the caller.