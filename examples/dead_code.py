"""Find functions that can never be called from the entry points of a small
call graph, marking a few steps at a time."""
import logging

import reachmark

logging.basicConfig(level=logging.INFO)

call_graph = reachmark.Graph.from_dict(
    {
        "main": ["parse_args", "run"],
        "parse_args": [],
        "run": ["load", "process", "run"],
        "load": ["open_file"],
        "process": ["transform", "save"],
        "transform": ["transform"],
        "save": ["open_file"],
        "open_file": [],
        "legacy_export": ["save", "old_format"],
        "old_format": [],
    }
)


if __name__ == "__main__":

    marker = reachmark.ReachabilityMarker(["main"], frontier="lifo")
    reachmark.CLMonitor(marker, total=len(call_graph), desc="call graph")

    while not marker.done:
        # do some other work between steps here
        result = marker.step(call_graph)
        logging.debug("%s", result)

    print(marker.state)
    print("unused:", sorted(set(call_graph.nodes) - marker.marked))
