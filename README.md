# isaac

A small 2D game engine built on pygame. A game is a tree of game objects
held by a scene. Each game object carries components such as shape
renderers, static collision objects and rigid bodies. Every frame, the
engine runs the input, physics, update, render and destroy phases.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running the demo

    isaac-demo

This opens an 800×600 window and plays `isaac.demo_scene.MainScene`. The
scene has four walls, a triangle of static obstacles, and a `Spawner` that
drops coloured `Particle`s, one per second by default. An inspector panel
(`Hud`) in the top-left corner shows three values:

- the number of particles spawned so far;
- the spawn rate;
- the particles' restitution.

Close the window to quit.

## Writing a game

Subclass `isaac.game_object.GameObject` and override any of its hooks:

- `on_start`
- `on_update(delta)`
- `on_draw(window)`
- `on_destroy`
- `on_collision_2d`

Objects and components are created with `make_child(cls, ...)` and
`make_component(cls, ...)`. Positions are properties: `position` is
relative to the parent and `global_position` is in world coordinates.
Calling `destroy()` queues an object for removal at the end of the frame.

To build a scene, add children to the `root` of a `Scene`. Then hand the
scene to `Isaac` and call `run()`:

```python
from isaac.collision_shape import Circle2DShape
from isaac.engine import Isaac
from isaac.game_object import GameObject
from isaac.logger import Level
from isaac.rigidbody import RigidBody2D
from isaac.scene import Scene
from isaac.shape_renderer import CircleShape, ShapeRenderer
from isaac.transform import Vector2


class Ball(GameObject):
    def on_start(self):
        body = self.make_component(RigidBody2D, Circle2DShape(10.0))
        body.set_restitution(0.5)  # attaches the shape so the ball collides
        renderer = self.make_component(ShapeRenderer)
        renderer.make_shape(CircleShape, 10.0)
        self.position = Vector2(400, 100)


class MyScene(Scene):
    def __init__(self):
        super().__init__()
        self.root.make_child(Ball)


game = Isaac("My game", (800, 600), Level.DEBUG)
game.set_scene(MyScene())
game.run()
```

If no scene was set, `run()` raises `isaac.engine.SceneNotFoundError`.

### Physics

`isaac.physics.PhysicsServer2D` simulates bodies with box
(`Box2DShape`) and circle (`Circle2DShape`) shapes. It applies downward
gravity, splits each step into four sub-steps, and resolves contacts with
restitution and friction. Each frame it also draws the shapes and their
bounding boxes onto the window.

There are two physics components:

- `CollisionObject2D` is a static body that follows its game object.
- `RigidBody2D` is a dynamic body that moves its game object. Its shape
  only takes part in collisions once `set_restitution` has been called.

## Other building blocks

- `isaac.observer`: `Observable` and `Observer` pass events between
  objects. The demo's spawner and inspector talk through them.
- `isaac.service_locator`: `ServiceLocator` registers and looks up one
  instance per service type. `get_service` raises `ServiceNotFoundError`
  for a type that has not been registered.
- `isaac.input`: `Input.key_pressed(key)` reports keyboard state, using
  pygame key codes. `Input.axis()`, `Input.x_axis()` and `Input.y_axis()`
  give the arrow-keys / WASD movement axis.
- `isaac.logger`: `Logger` writes `[time] - LEVEL - message` lines to
  standard error, or to a given stream. Messages below the logger's
  `Level` are filtered out. `LoggerNull` discards everything.
- `isaac.rng`: `RandomGenerator.range(low, high)` returns uniform floats.
  `RandomGenerator.seed(value)` reseeds the generator.
- `isaac.cyclic_iterator`: `CyclicIterator` steps round a sequence
  forever, with `next()` to go forward and `previous()` to go back.
- `isaac.thread_guard`: `ThreadGuard` runs a function in a thread and
  joins the thread when the `with` block is left.

## What it does not do

- **The inspector cannot be edited with the mouse.** The demo's panel only
  displays its values. They change only through `Hud.set_spawn_rate` and
  `Hud.set_restitution`.
- **Collisions are not reported to game objects.** `PhysicsServer2D.update`
  returns the contacts it found, but the frame loop never calls
  `on_collision_2d`.
- **Some demo objects are not in the demo scene.** `Player` and `Orbiter`
  are defined in `isaac.demo_scene`, but `MainScene` does not use them.