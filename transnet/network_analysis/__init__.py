"""
Network analysis algorithms on the built translation graph:
- degree and node rankings
- closeness and betweenness centrality
- PageRank
- graph-level statistics (density, average degree, components, path lengths)
- export to JSON, CSV and networkx.
"""
