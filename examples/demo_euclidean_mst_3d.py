import numpy as np
from pyboruvka import EuclideanMST, plot_spanning_tree

rng = np.random.default_rng(0)
points = rng.normal(size=(150, 3))

tree = EuclideanMST(points)
fig = plot_spanning_tree(tree, title="3D Euclidean MST", marker_size=3)
fig.show()
