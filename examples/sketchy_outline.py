# examples/sketchy_outline.py
from softshape import shapes

outline = shapes.limit_edge(shapes.smooth_rect(200, 100, 25, div=3), 20.0)

# Explicit times give the same strokes on every run
for t in (0.0, 0.125, 0.25):
    strokes = shapes.to_sketchy(outline, 2, t=t, amplitude=1.5)
    first = strokes[0][0]
    print(f"t={t:.3f} strokes={len(strokes)} vertices={len(strokes[0])} first=({first.x:.2f}, {first.y:.2f})")
