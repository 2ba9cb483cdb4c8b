class BasicPort():
    """
    A named range of bits of some port, both bounds are inclusive (name[msb:lsb])

    :note: the name is not part of the range checks, it is used only to look up the port
    """
    __slots__ = ["name", "lsb", "msb"]

    def __init__(self, name: str, lsb: int, msb: int):
        if lsb < 0 or msb < lsb:
            raise ValueError("Invalid port range", name, lsb, msb)
        self.name = name
        self.lsb = lsb
        self.msb = msb

    @classmethod
    def fromWidth(cls, name: str, width: int) -> "BasicPort":
        if width <= 0:
            raise ValueError("Port width must be positive", name, width)
        return cls(name, 0, width - 1)

    @property
    def width(self) -> int:
        return self.msb - self.lsb + 1

    def contained(self, other: "BasicPort") -> bool:
        """
        :return: True if the range of this port is inside of the range of other port
        """
        return self.lsb >= other.lsb and self.msb <= other.msb

    def __eq__(self, other):
        return isinstance(other, BasicPort) and\
            self.name == other.name and\
            self.lsb == other.lsb and\
            self.msb == other.msb

    def __hash__(self):
        return hash((self.name, self.lsb, self.msb))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__:s} {self.name:s}[{self.msb:d}:{self.lsb:d}]>"
