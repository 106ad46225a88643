# examples/relax_to_rect.py
from softshape import SoftBody, shapes

circle = shapes.circle(50.0, 24)
rect = shapes.smooth_rect(120.0, 60.0, 15.0, div=4)

body = SoftBody(circle, mass=1.0, k=40.0, c=2.0, fric=0.2)
body.set_shape(rect)

dt = 1 / 60
for frame in range(180):
    body.update(dt)
    if frame % 30 == 0:
        c = body.center()
        print(f"t={frame * dt:5.2f} center=({c.x:.2f}, {c.y:.2f}) rot={body.rotation:+.3f}")

print("outline:", [(round(p.x, 1), round(p.y, 1)) for p in body.get_shape()[:4]], "...")
