# examples/drag_vertex.py
from softshape import SoftBody, World, Vector2, shapes
from softshape.renderer import DebugRenderer

world = World()
blob = SoftBody(shapes.limit_edge(shapes.smooth_rect(80, 80, 20, div=2), 15.0), mass=1.0, k=30.0, c=1.0, fric=0.3)
world.add_body(blob)

# "Pointer down" at the right edge: grab the closest vertex
pointer = Vector2(45.0, 0.0)
body, index = world.nearest_vertex(pointer)
pin = world.pin(body, index, pointer)

for i in range(60):
    pin.set_target(pointer + Vector2(i * 0.5, 0.0))
    world.step(1 / 60)

world.unpin(pin)
for _ in range(120):
    world.step(1 / 60)

DebugRenderer(verbose=False).render_world(world)
