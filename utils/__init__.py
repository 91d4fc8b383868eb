"""
Supporting data structures and terminal display.

Modules:
    fifo            - FIFO queue for breadth-first traversals
    priority_queue  - Indexed binary min-heap with decrease-key
    union_find      - Union-Find (disjoint set) data structure
    display         - Rich rendering of graphs
"""
