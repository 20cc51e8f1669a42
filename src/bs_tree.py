from abc import ABC, abstractmethod
from typing import TypeVar, Generic, List, Iterator, Optional, Any

from bs_tree_node import BSTreeNode

T = TypeVar('T')

_MISSING: Any = object()


class BSTreeError(Exception):
    pass


class InvalidArgumentError(BSTreeError, ValueError):
    pass


class EmptyTreeError(BSTreeError, ValueError):
    pass


class NoSuchElementError(BSTreeError, IndexError):
    pass


class TreeIterator(Generic[T]):
    """One-shot forward iterator over a traversal snapshot.

    The elements are copied when the iterator is built, so changes made to
    the tree afterwards are not seen. Usable either through has_next()/next()
    or as a regular Python iterator; both share the same cursor.
    """

    def __init__(self, elements: List[T]) -> None:
        self._elements: List[T] = list(elements)
        self._index: int = 0

    def has_next(self) -> bool:
        return self._index < len(self._elements)

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError("next on exhausted iterator")
        value = self._elements[self._index]
        self._index += 1
        return value

    def __iter__(self) -> 'TreeIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        return f"TreeIterator(remaining={len(self._elements) - self._index})"


class BSTreeADT(ABC, Generic[T]):
    @abstractmethod
    def get_root(self) -> BSTreeNode[T]: ...

    @abstractmethod
    def get_height(self) -> int: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def contains(self, entry: T) -> bool: ...

    @abstractmethod
    def search(self, entry: T) -> Optional[BSTreeNode[T]]: ...

    @abstractmethod
    def add(self, new_entry: T) -> bool: ...

    @abstractmethod
    def remove_min(self) -> Optional[BSTreeNode[T]]: ...

    @abstractmethod
    def remove_max(self) -> Optional[BSTreeNode[T]]: ...

    @abstractmethod
    def inorder_iterator(self) -> TreeIterator[T]: ...

    @abstractmethod
    def preorder_iterator(self) -> TreeIterator[T]: ...

    @abstractmethod
    def postorder_iterator(self) -> TreeIterator[T]: ...


class BSTree(BSTreeADT[T]):
    """Unbalanced binary search tree. Duplicates are rejected, None is never stored."""

    def __init__(self, element: T = _MISSING) -> None:
        self._root: Optional[BSTreeNode[T]] = None
        self._size: int = 0
        if element is _MISSING:
            return
        if element is None:
            raise InvalidArgumentError("cannot create tree with None element")
        self._root = BSTreeNode(element)
        self._size = 1

    def get_root(self) -> BSTreeNode[T]:
        if self._root is None:
            raise EmptyTreeError("root of empty tree")
        return self._root

    def get_height(self) -> int:
        height = 0
        level: List[BSTreeNode[T]] = [self._root] if self._root is not None else []
        while level:
            height += 1
            next_level: List[BSTreeNode[T]] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return height

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def contains(self, entry: T) -> bool:
        if entry is None:
            raise InvalidArgumentError("cannot search for None entry")
        return self.search(entry) is not None

    def search(self, entry: T) -> Optional[BSTreeNode[T]]:
        if entry is None:
            raise InvalidArgumentError("cannot search for None entry")
        node = self._root
        while node is not None:
            if entry < node.element:
                node = node.left
            elif entry > node.element:
                node = node.right
            else:
                return node
        return None

    def add(self, new_entry: T) -> bool:
        if new_entry is None:
            raise InvalidArgumentError("cannot add None entry")
        if self._root is None:
            self._root = BSTreeNode(new_entry)
            self._size += 1
            return True

        node = self._root
        while True:
            if new_entry < node.element:
                if node.left is None:
                    node.left = BSTreeNode(new_entry)
                    self._size += 1
                    return True
                node = node.left
            elif new_entry > node.element:
                if node.right is None:
                    node.right = BSTreeNode(new_entry)
                    self._size += 1
                    return True
                node = node.right
            else:
                return False

    def remove_min(self) -> Optional[BSTreeNode[T]]:
        """Detach and return the node holding the smallest element.

        The returned node keeps its links as they were; its right child (if
        any) takes its place in the tree. Returns None on an empty tree.
        """
        if self._root is None:
            return None

        if self._root.left is None:
            min_node = self._root
            self._root = min_node.right
            self._size -= 1
            return min_node

        parent = self._root
        node = self._root.left
        while node.left is not None:
            parent = node
            node = node.left
        parent.left = node.right
        self._size -= 1
        return node

    def remove_max(self) -> Optional[BSTreeNode[T]]:
        """Mirror image of remove_min(): the largest element's left child takes its place."""
        if self._root is None:
            return None

        if self._root.right is None:
            max_node = self._root
            self._root = max_node.left
            self._size -= 1
            return max_node

        parent = self._root
        node = self._root.right
        while node.right is not None:
            parent = node
            node = node.right
        parent.right = node.left
        self._size -= 1
        return node

    def inorder_iterator(self) -> TreeIterator[T]:
        return TreeIterator(self._in_order())

    def preorder_iterator(self) -> TreeIterator[T]:
        return TreeIterator(self._pre_order())

    def postorder_iterator(self) -> TreeIterator[T]:
        return TreeIterator(self._post_order())

    def copy(self) -> 'BSTree[T]':
        clone: BSTree[T] = BSTree()
        for element in self._pre_order():
            clone.add(element)
        return clone

    # Traversals use explicit stacks so chain-shaped trees don't hit the recursion limit.
    def _in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[BSTreeNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.element)
            node = node.right
        return result

    def _pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BSTreeNode[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.element)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def _post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BSTreeNode[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.element)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __len__(self) -> int:
        return self._size

    def __contains__(self, entry: T) -> bool:
        return self.contains(entry)

    def __iter__(self) -> Iterator[T]:
        return self.inorder_iterator()

    def __repr__(self) -> str:
        return f"BSTree({self._in_order()})"

    def __str__(self) -> str:
        return f"BSTree(size={self._size}, height={self.get_height()})"
