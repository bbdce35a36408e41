"""
Pydantic schema definitions for the domain model.

The same models are used for API payloads and for the values passed
between the service and data layers, which keeps equality structural
across all layers.
"""
