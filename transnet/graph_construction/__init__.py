"""
Turning bibliographic records into a typed co-occurrence graph:
- reading archive records
- resolving dimension values (author, translator, publisher, place, language, custom)
- classifying relationship types
- building deduplicated nodes and weighted edges.
"""
