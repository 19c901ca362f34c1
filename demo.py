"""
Balanced Tree Demo — rotation cases, height growth, and a random workload.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

from balanced_tree.avl_tree import AVLTree
from balanced_tree.binary_search_tree import BinarySearchTree

SEED = 42
SIZES = np.arange(1, 1001)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def avl_bound(n: np.ndarray) -> np.ndarray:
    return 1.44 * np.log2(n + 2) - 0.328


def example_1_rotation_cases():
    """The four single-insert imbalance cases and the outline each one ends in."""
    print("=" * 60)
    print("Example 1: Rotation Cases")
    print("=" * 60)

    cases = {
        "LL": [30, 20, 10],
        "RR": [10, 20, 30],
        "LR": [30, 10, 20],
        "RL": [10, 30, 20],
    }

    fig, axes = plt.subplots(2, 2, figsize=(10, 8))
    for ax, (name, keys) in zip(axes.flat, cases.items()):
        plain = BinarySearchTree(keys)
        balanced = AVLTree(keys)
        print(f"\n{name}: insert {keys}")
        print("  plain BST:")
        print(plain.render("    "))
        print("  AVL:")
        print(balanced.render("    "))

        text = f"insert {keys}\n\nplain BST\n{plain.render()}\n\nAVL\n{balanced.render()}"
        ax.text(0.05, 0.95, text, va="top", ha="left", family="monospace", fontsize=10)
        ax.set_title(f"{name} case")
        ax.axis("off")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_rotation_cases.png", dpi=150)
    plt.close(fig)

    return fig


def example_2_height_growth():
    """Height after n ascending inserts: plain BST vs AVL vs the AVL bound."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth (ascending inserts)")
    print("=" * 60)

    plain = BinarySearchTree()
    balanced = AVLTree()
    plain_heights = np.zeros(len(SIZES), dtype=int)
    avl_heights = np.zeros(len(SIZES), dtype=int)
    for i, n in enumerate(SIZES):
        plain.insert(int(n))
        balanced.insert(int(n))
        plain_heights[i] = plain.height()
        avl_heights[i] = balanced.height()

    bound = avl_bound(SIZES)
    violations = int(np.sum(avl_heights > bound))
    print(f"Final plain BST height: {plain_heights[-1]}")
    print(f"Final AVL height:       {avl_heights[-1]}")
    print(f"AVL bound at n={SIZES[-1]}:   {bound[-1]:.2f}")
    print(f"Bound violations:       {violations}")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    ax1.plot(SIZES, plain_heights, label="Plain BST", color="indianred")
    ax1.plot(SIZES, avl_heights, label="AVL", color="steelblue")
    ax1.set_xlabel("n (keys inserted)")
    ax1.set_ylabel("Tree height")
    ax1.set_title("Ascending inserts")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.step(SIZES, avl_heights, where="post", label="AVL height", color="steelblue")
    ax2.plot(SIZES, bound, "g--", label="1.44·log2(n+2) − 0.328")
    ax2.plot(SIZES, np.log2(SIZES + 1), "k:", label="log2(n+1)")
    ax2.set_xscale("log")
    ax2.set_xlabel("n (log scale)")
    ax2.set_ylabel("Tree height")
    ax2.set_title("AVL height vs. theoretical bounds")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, avl_heights


def example_3_random_workload(n_ops: int = 5000, key_space: int = 500):
    """Random inserts and removes, checking every invariant after each step."""
    print("\n" + "=" * 60)
    print("Example 3: Random Workload")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    keys = rng.integers(0, key_space, size=n_ops)
    is_insert = rng.random(n_ops) < 0.6

    tree = AVLTree()
    sizes = np.zeros(n_ops, dtype=int)
    heights = np.zeros(n_ops, dtype=int)
    invalid = 0
    for i in range(n_ops):
        key = int(keys[i])
        if is_insert[i]:
            tree.insert(key)
        else:
            tree.remove(key)
        if not tree.is_valid():
            invalid += 1
        sizes[i] = tree.size()
        heights[i] = tree.height()

    print(f"Operations:        {n_ops}")
    print(f"Final size:        {tree.size()}")
    print(f"Max height:        {heights.max()}")
    print(f"Invalid states:    {invalid}")

    fig, ax = plt.subplots(figsize=(10, 5))
    steps = np.arange(n_ops)
    ax.plot(steps, heights, label="AVL height", color="steelblue")
    ax.plot(steps, avl_bound(np.maximum(sizes, 1)), "g--", label="bound for current size")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Height")
    ax.set_title(f"Random insert/remove workload (seed {SEED})")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_random_workload.png", dpi=150)
    plt.close(fig)

    return fig, tree


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Balanced Search Trees", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Plain BST and AVL on one engine", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_name in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / image_name))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 19 + "BALANCED TREE DEMO" + " " * 21 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_rotation_cases()
    example_2_height_growth()
    example_3_random_workload()

    generate_pdf_report([
        ("Example 1: Rotation Cases", "01_rotation_cases.png"),
        ("Example 2: Height Growth", "02_height_growth.png"),
        ("Example 3: Random Workload", "03_random_workload.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
