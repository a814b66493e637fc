from simulator.symbols import BLANK, Direction


class Tape:
    """
    Finite list of cells standing in for a tape unbounded in both directions.
    The list grows one blank cell at a time, only when the head steps past an edge.
    """

    def __init__(self, symbols=(), head=0, blank=BLANK):
        self.blank = blank
        self.cells = list(symbols) or [blank]
        if not 0 <= head < len(self.cells):
            raise ValueError(f"Head position {head} outside tape of length {len(self.cells)}")
        self.head = head
        self.growth_events = 0

    def __len__(self):
        return len(self.cells)

    def read(self):
        return self.cells[self.head]

    def write(self, symbol):
        self.cells[self.head] = symbol

    def move_head(self, direction):
        if direction is Direction.RIGHT:
            self.head += 1
            if self.head == len(self.cells):
                self.cells.append(self.blank)
                self.growth_events += 1
        elif direction is Direction.LEFT:
            if self.head > 0:
                self.head -= 1
            else:
                # Every existing index shifts right by one
                self.cells.insert(0, self.blank)
                self.growth_events += 1
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

    def snapshot(self):
        return tuple(self.cells)
