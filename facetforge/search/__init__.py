"""
Faceted search orchestration.

Modules:
- query: engine-neutral Search builder
- request: parsed SearchRequest
- container: filter registry and search context builder
- manager: FiltersManager, the entry point
- response: SearchResponse
"""
