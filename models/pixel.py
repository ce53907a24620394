class Pixel:
    """
    Integer (row, col) position in an image grid.

    Equality and hashing are structural, so pixels can be compared,
    stored in sets and used as dict keys.
    """

    __slots__ = ("row", "col")

    def __init__(self, row: int, col: int):
        self.row = int(row)
        self.col = int(col)

    def __eq__(self, other):
        return (
            isinstance(other, Pixel)
            and self.row == other.row
            and self.col == other.col
        )

    def __hash__(self):
        return hash(("pixel", self.row, self.col))

    def __iter__(self):
        yield self.row
        yield self.col

    def __repr__(self):
        return f"Pixel({self.row}, {self.col})"
