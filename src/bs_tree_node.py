from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class BSTreeNode(Generic[T]):
    """A binary search tree node: one element and two owned child links.

    The node does no validation. Assigning None to a link detaches that
    subtree; assigning a node hands it (and everything below it) over.
    """

    def __init__(self, element: T,
                 left: Optional['BSTreeNode[T]'] = None,
                 right: Optional['BSTreeNode[T]'] = None) -> None:
        self.element: T = element
        self.left: Optional[BSTreeNode[T]] = left
        self.right: Optional[BSTreeNode[T]] = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BSTreeNode({self.element!r})"
