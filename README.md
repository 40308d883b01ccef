# spacefighter

Building blocks for a small 2D arcade space shooter. The package contains
the maths, the input identifiers, the collision rules, particles, explosions
and resource caching. It has no rendering or audio library built in. Drawing
and sound go through objects that you pass in, such as a sprite batch, a
texture, an animation or a sound. Any object with the expected methods and
attributes will work.

Time is always passed as elapsed seconds. Each `update(elapsed)` advances an
object by one frame.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `spacefighter.vector2`: `Vector2`, an immutable 2D vector.
  - Arithmetic: `+`, `-`, `*` and `/` by a scalar, and unary `-`.
  - Methods: `length`, `length_squared`, `normalized`, `is_zero`, `dot`,
    `cross`, `left`, `right` and `to_point`. `to_point` truncates each
    component toward zero.
  - Static methods: `distance`, `distance_squared`, `lerp` and `random`.
    `lerp` clamps its value to [0, 1].
  - Constants: `ZERO`, `ONE`, `UNIT_X` and `UNIT_Y`.
- `spacefighter.keys`: the `Key` and `MouseButton` integer enumerations.
- `spacefighter.gamepad`: `GamePadState` together with `GamePadButtons`,
  `GamePadDPad`, `GamePadTriggers`, `GamePadThumbSticks`, `Button` and
  `ButtonState`.
  - `is_button_down` and `is_button_up` look up any `Button`.
  - `reset()` releases every button and zeroes the triggers. It leaves the
    thumbsticks unchanged.
- `spacefighter.region`: `Region`, an integer rectangle.
  - Build one directly or with `Region.from_corner`.
  - Edge and corner properties: `top`, `bottom`, `left`, `right`,
    `top_left` and the other corners. There is also a `center` property.
  - `set` replaces all four components. `translate` moves the rectangle.
- `spacefighter.masks`: `CollisionType` and `TriggerType`.
  - These are `IntFlag` masks that combine with `|`, `&` and `^`.
  - `contains()` is true when two masks share any bit.
- `spacefighter.resources`: `ResourceManager`, which loads resources and
  caches them by path.
  - A resource type is any class that can be built with no arguments and
    has a `load(path, manager)` method returning True on success.
  - By default the manager's `content_path` is prefixed to the path.
  - A failed load raises `ResourceLoadError`.
  - Asking for a cached path with the wrong type raises `TypeError`.
  - A cached resource with a true `cloneable` attribute is handed out as a
    fresh `clone()` each time.
  - `unload_all()` forgets everything.
- `spacefighter.attachments`: the abstract `Attachable` and `Attachment`
  base classes. These are for items that are mounted at an offset on another
  object.
- `spacefighter.particles`: `Particle`, `ParticleInitializer`,
  `ParticleUpdater`, `ParticleRenderer` and `ParticleEmitter`.
  - `ParticleEmitter.emit(amount, elapsed)` takes inactive particles from
    its `pool`. It raises `RuntimeError` if no pool is set.
  - Fractional particles accumulate in `remaining_particles`, as do
    particles that the pool could not supply.
- `spacefighter.collision_manager`: `CollisionManager`, which pairs two
  collision types with a callback.
  - Objects need `collision_type`, `position` and `collision_radius`.
  - When two circles overlap, the callback gets the two objects in
    ascending order of collision type.
  - A pair of types that has no callback is remembered as non-colliding.
- `spacefighter.explosion`: `Explosion`, a one-shot animation with an
  optional sound. It is placed with a random rotation when activated.

## Example

```python
from spacefighter.vector2 import Vector2
from spacefighter.masks import CollisionType
from spacefighter.collision_manager import CollisionManager

a = Vector2(3, 4)
print(a.length())                       # 5.0
print(Vector2.lerp(Vector2(), a, 0.5))  # { 1.5, 2 }

enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
player_shot = CollisionType.PLAYER | CollisionType.PROJECTILE
print(enemy_ship.contains(CollisionType.SHIP))  # True

manager = CollisionManager()
manager.add_collision_type(player_shot, enemy_ship, lambda a, b: print("hit"))
```

## What the package does not do

This is not a playable game. There is no game loop, window, renderer, audio
player or input polling. There are also no ships, weapons, projectiles or
levels. The package supplies the pieces listed above, and a game built on
top of it has to provide those parts itself.