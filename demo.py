import logging
import os
import sys

from balanced_trees import AVLTree, MinHeap, RedBlackTree, SimpleBinarySearchTree, SplayTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

DEFAULT_ELEMENTS = [5, 3, 8, 1, 4, 7, 9, 2, 6, 0]

TREES = {
    "Simple": SimpleBinarySearchTree,
    "AVL": AVLTree,
    "Red-Black": RedBlackTree,
    "Splay": SplayTree,
}


def parse_elements(args: list[str]) -> list[int]:
    try:
        return [int(arg) for arg in args] if args else DEFAULT_ELEMENTS
    except ValueError as e:
        raise SystemExit(f"Elements must be integers: {e}")


def main(args: list[str]) -> None:
    elements = parse_elements(args)
    logger.debug(f"Inserting {elements}")

    for name, tree_class in TREES.items():
        tree = tree_class()
        for element in elements:
            tree.add(element)
        tree.validate()

        print(f"\n{name} tree")
        print(tree)

        # Queries splay a SplayTree, so they run after the tree is drawn
        smallest = tree.find_min()
        largest = tree.find_max()
        logger.info(f"{name}: size={tree.size()} min={smallest} max={largest}")

    heap = MinHeap()
    for element in elements:
        heap.add(element)
    drained = [heap.remove() for _ in range(heap.size())]
    logger.info(f"Heap drain order: {drained}")


if __name__ == "__main__":
    main(sys.argv[1:])
