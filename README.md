# latren

The core data structures and bookkeeping of a small game engine. It is
written in plain Python and has no dependencies outside the standard library.

## Contents

- `latren.resourcetypes`: `ResourceType` is an `IntFlag` of resource kinds.
  Its `has()` method tests whether two masks share a bit.
- `latren.resourcepath`: `ResourcePath` holds a path with `${name}`
  variables. `PathVariables` is a table of those variables and expands
  them. The default table is `DEFAULT_PATH_VARS`, and `${cwd}` is the
  working directory. Cyclic variables raise `ValueError`. `resource_dir()`
  gives the default directory of a resource type.
- `latren.serializablestruct`: `SerializableStruct` records its typed members
  in order, together with comment and blank-line entries (`MemberData`,
  `MetaType`). It provides `get_member`, `set_member` and `copy_from`.
  `VideoSettings` holds gamma, contrast, brightness, saturation, fov,
  vsync, fullscreen and resolution settings.
- `latren.components`: `Component` defines the lifecycle hooks `start`,
  `update`, `fixed_update` and `delete`. `SerializableField` declares a
  serialisable attribute, and `serializable_fields()` lists a component
  type's fields. `Transform` holds position, quaternion rotation, size and
  a static flag, and builds a transformation matrix.
- `latren.componentpool`: `ComponentPool` stores at most one component per
  entity. `ComponentMemoryManager` holds one pool per component type.
- `latren.registry`: `ComponentRegistry` registers component types by name.
  `Transform` is always registered. `dump_component_data()` writes each
  type's fields to a text stream.
- `latren.entities`: `EntityManager` creates entities, each of which starts
  with a `Transform`. It tracks entity names, adds and removes components
  by type or by registered name, and runs start, update and fixed update on
  every component. `Entity` is a handle to one entity.
- `latren.frustum`: `AABB`, `FrustumPlane`, `ViewFrustum` and `Camera` do
  frustum culling. `Camera.update_frustum()` rebuilds the six planes.
- `latren.atlas`: `create_atlas()` packs `Sprite`s with a skyline packer
  into the smallest square atlas that fits. The sizes tried are 128, 256,
  512, 1024, 2048 and 4096. If the sprites do not fit, the atlas is empty.
- `latren.imageops`: `flip_horizontally()` mirrors a raw pixel buffer.
  `cubemap_face_paths()` lists the six face image paths of a cubemap.
- `latren.material`: `Material` holds a shader, a texture, face culling and
  uniforms. `use()` applies them through any object that has `use`,
  `set_uniform`, `bind_texture` and `set_face_culling`.
- `latren.mesh`: `Mesh` holds flat vertex, index, texture-coordinate and
  normal lists.
- `latren.cfg`: the CFG data model. It covers `CFGField` trees,
  `CFGFieldType` and the `is_valid_type()` rules. Templates are built from
  `StructuredField`, `mandatory()`, `optional()`, `CFGFileTemplate` and
  `CFGFileTemplateFactory`. `create_field()` and `cfg_types_for()` are
  also here.
- `latren.deserialization`: `DeserializerRegistry` and
  `DeserializationContext` turn parsed JSON or CFG values into typed values.
  Ready-made deserializers are `deserialize_json_number`,
  `json_vector_deserializer()` and `cfg_vector_deserializer()`.
- `latren.serializers`: `FileSerializer` and `JSONFileSerializer` are
  abstract file readers and writers that report a `SerializationStatus`.
  `ItemRegistry` keeps named items.
- `latren.resourcemanager`: `ResourceTypeManager` is an abstract loader for
  one kind of resource. It keeps items in a table whose ids are
  case-insensitive. It handles `Import`/`Imports` lists, including the
  `!!` and `\!` path prefixes, and can load every file in a directory.
- `latren.clock`: `GameClock` computes the delta time. The delta is capped
  at 0.5 s and can be frozen for one frame. The clock also tracks fixed-rate
  ticks and an optional FPS limit, using times that the caller passes in.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Entities and components:

```python
from latren.registry import ComponentRegistry
from latren.components import Transform
from latren.entities import EntityManager

registry = ComponentRegistry()
manager = EntityManager(registry)
manager.setup()

player = manager.create_entity("player")
assert player.has_component(Transform)
assert manager.named_entity("player").transform() is player.transform()

manager.start_all()
manager.update_all()
```

Expanding resource paths:

```python
from latren.resourcepath import ResourcePath, PathVariables

variables = PathVariables({"gamedir": "/game", "res": "${gamedir}/res"})
print(ResourcePath("${res}/textures/a.png").parsed_str(variables))
# /game/res/textures/a.png
```

Deserialising a JSON vector:

```python
from latren.deserialization import DeserializerRegistry, json_vector_deserializer

deserializers = DeserializerRegistry()
deserializers.assign(json_vector_deserializer(3), tuple)
print(deserializers.deserialize_value(tuple, [1, 2, 3]))
# (1.0, 2.0, 3.0)
```

Frame timing:

```python
from latren.clock import GameClock

clock = GameClock(fixed_update_rate=60.0)
clock.start(0.0)
clock.advance(0.02)
print(clock.delta_time(), clock.is_fixed_update())
# 0.02 True
```

## What it does not do

The package holds the engine's data and logic only. It does not open
windows, draw with a graphics API, play audio or simulate physics, and it
does not run a game loop. `GameClock` only does the timing arithmetic.

No concrete loaders are included for textures, shaders, fonts, models,
audio or stages. `ResourceTypeManager`, `FileSerializer` and
`JSONFileSerializer` are abstract, so you supply the loading and parsing.

`latren.cfg` defines the CFG data model and its type rules, but it does not
read or write CFG text. The package provides no command-line program.