"""Edit distance allowing insertions and deletions, with free matches."""

from __future__ import annotations


class EditDistance:
    """Suffix table of edit distances between ``source`` and ``target``.

    ``table[i][j]`` is the distance between ``source[j:]`` and ``target[i:]``.
    Mismatched characters cannot be replaced, only deleted or inserted.
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        cols, rows = len(source), len(target)
        table = [[0] * (cols + 1) for _ in range(rows + 1)]
        for j in range(cols + 1):
            table[rows][j] = cols - j
        for i in range(rows + 1):
            table[i][cols] = rows - i
        for i in range(rows - 1, -1, -1):
            for j in range(cols - 1, -1, -1):
                if source[j] == target[i]:
                    table[i][j] = table[i + 1][j + 1]
                else:
                    table[i][j] = 1 + min(table[i + 1][j], table[i][j + 1])
        self.table = tuple(tuple(row) for row in table)

    @property
    def cost(self) -> int:
        """Distance between the whole strings."""
        return self.table[0][0]

    def format_table(self) -> str:
        """Render the table, one target position per line, cells 15 wide."""
        return "\n".join("".join(f"{value:<15} " for value in row) for row in self.table)


def edit_distance(source: str, target: str) -> int:
    """Return the number of insertions and deletions turning ``source`` into ``target``."""
    return EditDistance(source, target).cost