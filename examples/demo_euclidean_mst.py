from sklearn.datasets import make_blobs
import matplotlib.pyplot as plt
from pyboruvka import EuclideanMST, plot_spanning_tree

data, _ = make_blobs(
        n_samples=200,
        centers=3,
        cluster_std=0.50,
        random_state=0,
        shuffle=False,
    )

tree = EuclideanMST(data)
print(f"{len(tree.edges)} edges, total length {tree.total_weight:.3f}")

fig, ax = plt.subplots()
plot_spanning_tree(tree, ax=ax, marker_size=2)

plt.show()
