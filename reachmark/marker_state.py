class MarkerState:
    def __init__(self):
        self.done = False
        self.steps = 0

        # every step either marks a node or is a pure removal
        self.marked_count = 0
        self.noop_count = 0

        self.edges_scanned = 0
        self.frontier_size = 0
        self.max_frontier_size = 0

    def update_frontier_size(self, size):
        self.frontier_size = size
        self.max_frontier_size = max(self.max_frontier_size, size)

    def __str__(self):
        return (
            f"Done: {self.done}\n"
            f"Steps: {self.steps}\n"
            f"Marked: {self.marked_count}\n"
            f"No-ops: {self.noop_count}\n"
            f"Edges scanned: {self.edges_scanned}\n"
            f"Frontier: {self.frontier_size}\n"
            f"Max frontier: {self.max_frontier_size}\n"
        )

    def __repr__(self):
        return str(self)
