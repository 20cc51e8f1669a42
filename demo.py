"""
Binary Search Tree Demo -- Traversal orders, height growth under different
insertion orders, min/max extraction, and search depth distribution.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from bs_tree import BSTree, NoSuchElementError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SAMPLE = [5, 3, 8, 1, 4, 7, 9]
SIZES = [16, 32, 64, 128, 256, 512, 1024]
TRIALS = 20


def build_tree(values):
    bst = BSTree()
    for value in values:
        bst.add(int(value))
    return bst


def tree_layout(bst):
    """Place each node at (inorder rank, -depth). Returns positions and parent->child edges."""
    positions = {}
    edges = []
    if bst.is_empty():
        return positions, edges
    rank = 0
    stack = []
    node, depth = bst.get_root(), 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[id(node)] = (rank, -depth, node.element)
        rank += 1
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))
        node, depth = node.right, depth + 1
    return positions, edges


def draw_tree(ax, bst, title, highlight=None):
    positions, edges = tree_layout(bst)
    for parent, child in edges:
        x0, y0, _ = positions[parent]
        x1, y1, _ = positions[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for x, y, element in positions.values():
        color = COLORS["orange"] if element == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=700, color=color, edgecolor="white", zorder=2)
        ax.text(x, y, str(element), ha="center", va="center", color="white",
                fontsize=11, fontweight="bold", zorder=3)
    ax.set_title(f"{title}\nsize={bst.size()}, height={bst.get_height()}",
                 fontsize=10, fontweight="bold")
    ax.axis("off")
    ax.margins(0.15)


def search_depths(bst, values):
    depths = []
    for value in values:
        node, depth = bst.get_root(), 1
        while node.element != value:
            node = node.left if value < node.element else node.right
            depth += 1
        depths.append(depth)
    return np.array(depths)


# ---------------------------------------------------------------------------
# Example 1: Traversal Orders
# ---------------------------------------------------------------------------
def example_1_traversals():
    """Inorder, preorder and postorder of a small tree; snapshot iterators."""
    print("=" * 60)
    print("Example 1: Traversal Orders")
    print("=" * 60)

    bst = build_tree(SAMPLE)
    inorder = list(bst.inorder_iterator())
    preorder = list(bst.preorder_iterator())
    postorder = list(bst.postorder_iterator())

    print(f"\n  Inserted:  {SAMPLE}")
    print(f"  Inorder:   {inorder}")
    print(f"  Preorder:  {preorder}")
    print(f"  Postorder: {postorder}")
    print(f"  Size: {bst.size()}, Height: {bst.get_height()}")

    assert inorder == sorted(SAMPLE)
    assert preorder[0] == SAMPLE[0] and postorder[-1] == SAMPLE[0]

    it = bst.inorder_iterator()
    bst.add(6)
    snapshot = []
    while it.has_next():
        snapshot.append(it.next())
    try:
        it.next()
    except NoSuchElementError as exc:
        print(f"\n  Exhausted iterator raised {type(exc).__name__}: {exc}")
    print(f"  Iterator taken before add(6): {snapshot}")
    print(f"  Fresh inorder after add(6):   {list(bst.inorder_iterator())}")
    print(f"  add(6) again returns {bst.add(6)} (duplicate rejected)")

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    draw_tree(axes[0], build_tree(SAMPLE), f"Tree built from {SAMPLE}")

    orders = [("Inorder", inorder), ("Preorder", preorder), ("Postorder", postorder)]
    axes[1].axis("off")
    for row, (name, seq) in enumerate(orders):
        y = 0.8 - row * 0.3
        axes[1].text(0.0, y, name, fontsize=12, fontweight="bold", va="center",
                     transform=axes[1].transAxes)
        for i, element in enumerate(seq):
            axes[1].text(0.25 + i * 0.1, y, str(element), fontsize=12, ha="center",
                         va="center", transform=axes[1].transAxes,
                         bbox=dict(boxstyle="round", fc=COLORS["green"], ec="white"),
                         color="white")
    axes[1].set_title("Visit order per traversal", fontsize=10, fontweight="bold")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversals.png", dpi=120)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 2: Height vs Insertion Order
# ---------------------------------------------------------------------------
def example_2_height_growth():
    """Random insertion keeps height near log2(n); sorted insertion degrades to a chain."""
    print("\n" + "=" * 60)
    print("Example 2: Height vs Insertion Order")
    print("=" * 60)

    random_mean = []
    random_std = []
    sorted_heights = []
    for n in SIZES:
        heights = np.array([build_tree(np.random.permutation(n)).get_height()
                            for _ in range(TRIALS)])
        random_mean.append(heights.mean())
        random_std.append(heights.std())
        sorted_heights.append(build_tree(range(n)).get_height())
        print(f"  n={n:5d}  random: {heights.mean():6.1f} +/- {heights.std():4.1f}"
              f"   sorted: {sorted_heights[-1]:5d}   log2(n+1): {np.log2(n + 1):5.1f}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))

    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], label="Sorted insertion")
    axes[0].errorbar(sizes, random_mean, yerr=random_std, fmt="o-", color=COLORS["blue"],
                     capsize=3, label=f"Random insertion (mean of {TRIALS})")
    axes[0].plot(sizes, np.ceil(np.log2(sizes + 1)), "--", color=COLORS["green"],
                 label="Minimum possible height")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Number of elements")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height growth: no rebalancing means order matters",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    ratio = np.array(random_mean) / np.log2(sizes + 1)
    axes[1].bar(np.arange(len(SIZES)), ratio, color=COLORS["purple"], edgecolor="white")
    axes[1].set_xticks(np.arange(len(SIZES)))
    axes[1].set_xticklabels([str(n) for n in SIZES])
    axes[1].set_xlabel("Number of elements")
    axes[1].set_ylabel("mean height / log2(n+1)")
    axes[1].set_title("Random trees stay within a small factor of optimal",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=120)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Min / Max Extraction
# ---------------------------------------------------------------------------
def example_3_extreme_removal():
    """remove_min()/remove_max() detach a node and splice its one child into place."""
    print("\n" + "=" * 60)
    print("Example 3: Min / Max Extraction")
    print("=" * 60)

    values = [10, 5, 15, 7, 6, 8, 13, 12, 14]
    bst = build_tree(values)
    before = build_tree(values)

    min_node = bst.remove_min()
    print(f"\n  remove_min() -> {min_node!r}, still linked to right child {min_node.right!r}")
    print(f"  Inorder after: {list(bst.inorder_iterator())}, size={bst.size()}")
    after_min = bst.copy()

    max_node = bst.remove_max()
    print(f"  remove_max() -> {max_node!r}, still linked to left child {max_node.left!r}")
    print(f"  Inorder after: {list(bst.inorder_iterator())}, size={bst.size()}")

    ascending = []
    drain = build_tree(values)
    while not drain.is_empty():
        ascending.append(drain.remove_min().element)
    print(f"  Draining with remove_min(): {ascending}")
    print(f"  Extra remove_min() on empty tree: {drain.remove_min()}")
    assert ascending == sorted(values)

    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    draw_tree(axes[0], before, "Before", highlight=min_node.element)
    draw_tree(axes[1], after_min, f"After remove_min() -> {min_node.element}",
              highlight=max_node.element)
    draw_tree(axes[2], bst, f"After remove_max() -> {max_node.element}")
    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_extreme_removal.png", dpi=120)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 4: Search Depth Distribution
# ---------------------------------------------------------------------------
def example_4_search_depth():
    """How many comparisons search() needs per element, random vs skewed trees."""
    print("\n" + "=" * 60)
    print("Example 4: Search Depth Distribution")
    print("=" * 60)

    n = 512
    values = np.random.permutation(n)
    random_tree = build_tree(values)
    # Mostly sorted: a few random swaps on top of increasing order
    skewed = np.arange(n)
    for _ in range(n // 8):
        i, j = np.random.randint(0, n, size=2)
        skewed[i], skewed[j] = skewed[j], skewed[i]
    skewed_tree = build_tree(skewed)

    random_depths = search_depths(random_tree, range(n))
    skewed_depths = search_depths(skewed_tree, range(n))
    assert all(random_tree.contains(v) for v in range(n))

    print(f"\n  Random tree:  height={random_tree.get_height()}, "
          f"mean comparisons={random_depths.mean():.1f}")
    print(f"  Skewed tree:  height={skewed_tree.get_height()}, "
          f"mean comparisons={skewed_depths.mean():.1f}")

    fig, ax = plt.subplots(figsize=(12, 5.5))
    bins = np.arange(1, max(random_depths.max(), skewed_depths.max()) + 2)
    ax.hist(random_depths, bins=bins, alpha=0.7, color=COLORS["blue"],
            label=f"Random order (mean {random_depths.mean():.1f})")
    ax.hist(skewed_depths, bins=bins, alpha=0.6, color=COLORS["red"],
            label=f"Nearly sorted order (mean {skewed_depths.mean():.1f})")
    ax.set_xlabel("Nodes visited by search()")
    ax.set_ylabel("Number of elements")
    ax.set_title(f"Search cost over all {n} elements", fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3, axis="y")
    plt.tight_layout()
    fig.savefig(VIZ_DIR / "04_search_depth.png", dpi=120)
    plt.close(fig)


def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Unbalanced, duplicate-free, snapshot traversals",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Every element in a node's left subtree is smaller and every element\n"
            "in its right subtree is larger. Insertion and search walk one path\n"
            "from the root, so their cost is the tree height: about log2(n) for\n"
            "random input, n for sorted input since nothing rebalances.\n\n"
            "This demo covers:\n"
            "  1. Inorder / preorder / postorder and snapshot iterators\n"
            "  2. Height growth under random vs sorted insertion\n"
            "  3. remove_min() / remove_max() splicing\n"
            "  4. Search cost distribution\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_traversals.png": "Example 1: Traversal Orders",
            "02_height_growth.png": "Example 2: Height vs Insertion Order",
            "03_extreme_removal.png": "Example 3: Min / Max Extraction",
            "04_search_depth.png": "Example 4: Search Depth Distribution",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_traversals()
    example_2_height_growth()
    example_3_extreme_removal()
    example_4_search_depth()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
