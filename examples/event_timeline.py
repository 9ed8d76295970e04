"""Incremental layering of an event timeline.

Events are stored latest first, so the first layer holds the most recent
events. Each call to ``sort()`` merges newly recorded events into the existing
layers without moving events placed earlier.

Placed events never move, so only events that happened before the ones
already shown can be merged without breaking the order. An event recorded
after an already placed one lands wherever there is room, which may be a
layer at or below that event.
"""

import graff

timeline: graff.EventGraph[str] = graff.EventGraph()
timeline.add_edge("boot", "login")
timeline.add_edge("boot", "sync")

sorter = timeline.coffman_graham_sorter(width=2)
for index, layer in enumerate(sorter.sort()):
    print(f"layer {index}: {layer}")

# Older history is recovered from a log: both happened before "boot".
timeline.add_edge("power-on", "boot")
timeline.add_edge("self-test", "boot")

print()
for index, layer in enumerate(sorter.sort()):
    print(f"layer {index}: {layer}")
