"""
Microbenchmark: time per World.step vs number of soft bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from softshape import SoftBody, World, Vector2, shapes
from softshape.profiler import Profiler


def run(n: int, steps: int = 300, vertices: int = 32):
    prof = Profiler()
    world = World(profiler=prof)

    rng = np.random.default_rng(12345)
    ring = shapes.circle(20.0, vertices)
    rect = shapes.smooth_rect(50.0, 30.0, 8.0, div=vertices // 4 - 2)

    side = int(np.ceil(np.sqrt(n)))
    k = 0
    for iy in range(side):
        for ix in range(side):
            if k >= n:
                break
            offset = Vector2(60.0 * ix, 60.0 * iy)
            body = SoftBody(shapes.translate(ring, offset), 1.0, 30.0, 1.0, 0.2)
            # Jitter the points a little so every body has work to do
            for pt in body.points:
                pt.p = pt.p + Vector2.of(rng.normal(scale=0.5, size=2))
            body.set_shape(rect)
            world.add_body(body)
            k += 1

    # warmup
    for _ in range(30):
        world.step(1 / 60)

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step(1 / 60)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [1, 10, 50, 100]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["pins", "update"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
