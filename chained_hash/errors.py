class KeyNotFound(KeyError):
    pass


class ElementNotFound(KeyError):
    pass


class TraversalExhausted(StopIteration):
    pass


class ConcurrentModification(RuntimeError):
    def __init__(self, message: str = "container changed during iteration"):
        super().__init__(message)


class EmptyContainer(Exception):
    pass


class IndexOutOfRange(IndexError):
    def __init__(self, index: int, size: int):
        super().__init__(f"index {index} out of range for size {size}")
        self.index = index
        self.size = size
