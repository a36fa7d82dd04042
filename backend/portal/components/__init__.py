"""Pure business components.

- filtering: item filter predicates and facet extraction
- folders: folder deletion policy
- catalog: listing page state and creatable content types
"""
