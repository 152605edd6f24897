"""Binary tree routines: building, walking, encoding and path finding."""

from collections import Counter
from dataclasses import dataclass, field
from itertools import islice

_NULL = "null"


@dataclass(eq=False)
class TreeNode:
    """Binary tree node; ``next`` links a node to its right-hand neighbour."""

    val: int
    left: "TreeNode | None" = None
    right: "TreeNode | None" = None
    next: "TreeNode | None" = field(default=None, repr=False)


def connect(root):
    """Link each node's ``next`` to the node on its right in the same level.

    The last node of every level keeps ``next`` as None; returns ``root``.
    """
    level = [root] if root is not None else []
    while level:
        for node, neighbour in zip(level, level[1:] + [None]):
            node.next = neighbour
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return root


def max_path_sum(root):
    """Return the largest sum along any path between two nodes of the tree."""
    if root is None:
        raise ValueError("max_path_sum() of an empty tree")
    best = root.val

    def downward(node):
        nonlocal best
        if node is None:
            return 0
        left = max(downward(node.left), 0)
        right = max(downward(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    downward(root)
    return best


def build_tree(preorder, inorder):
    """Rebuild a tree with unique values from its preorder and inorder walks."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    position = {value: index for index, value in enumerate(inorder)}
    values = iter(preorder)

    def build(low, high):
        if low > high:
            return None
        value = next(values)
        if value not in position:
            raise ValueError(f"value {value!r} missing from inorder walk")
        node = TreeNode(value)
        middle = position[value]
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(inorder) - 1)


def _inorder(root):
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root, k):
    """Return the ``k``-th smallest value, counting from 1, of a search tree."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    found = list(islice(_inorder(root), k - 1, k))
    if not found:
        raise ValueError(f"tree has fewer than {k} nodes")
    return found[0]


def _path_to(root, value):
    stack = [(root, "")] if root is not None else []
    while stack:
        node, path = stack.pop()
        if node.val == value:
            return path
        if node.right is not None:
            stack.append((node.right, path + "R"))
        if node.left is not None:
            stack.append((node.left, path + "L"))
    raise ValueError(f"value {value!r} is not in the tree")


def get_directions(root, start_value, dest_value):
    """Return the shortest moves from one node to another: 'U' for up to the
    parent, 'L' and 'R' for down to a child."""
    to_start = _path_to(root, start_value)
    to_dest = _path_to(root, dest_value)
    shared = 0
    for step_start, step_dest in zip(to_start, to_dest):
        if step_start != step_dest:
            break
        shared += 1
    return "U" * (len(to_start) - shared) + to_dest[shared:]


def serialize(root):
    """Encode the tree level by level as comma-separated values, writing
    'null' for every missing child."""
    tokens = []
    queue = [root]
    for node in queue:
        if node is None:
            tokens.append(_NULL)
        else:
            tokens.append(str(node.val))
            queue.extend((node.left, node.right))
    return ",".join(tokens)


def deserialize(data):
    """Decode a tree written by :func:`serialize`.

    Children missing from the end of the text are taken to be empty.
    """
    nodes = [
        None if token.strip() == _NULL else TreeNode(int(token))
        for token in data.split(",")
    ]
    root = nodes[0]
    if root is None:
        return None
    children = iter(nodes[1:])
    queue = [root]
    for node in queue:
        node.left = next(children, None)
        node.right = next(children, None)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


def find_duplicate_subtrees(root):
    """Return one root for each subtree shape that occurs more than once."""
    shapes = {}
    seen = Counter()
    duplicates = []

    def visit(node):
        if node is None:
            return 0
        key = (node.val, visit(node.left), visit(node.right))
        shape = shapes.setdefault(key, len(shapes) + 1)
        seen[shape] += 1
        if seen[shape] == 2:
            duplicates.append(node)
        return shape

    visit(root)
    return duplicates