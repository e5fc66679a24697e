"""
Pydantic schema definitions for API payloads.

Each route defines its own response models.  Every success body has
the same outer shape: the echoed ``input``, the computed ``result`` and
a short ``info`` string describing what the endpoint demonstrates.
"""
