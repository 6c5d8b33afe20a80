class CityLinkError(Exception):
    pass


class MalformedInput(CityLinkError):
    pass


class InvalidNode(CityLinkError):
    def __init__(self, node: int, size: int):
        super().__init__(f"city {node} is out of range, expected 0 to {size - 1}")
        self.node = node
        self.size = size
