"""
Service layer.

Each service validates the input of one route and builds its response
model.  Invalid input is reported by raising one of the errors from
``core.errors``; route handlers never build error bodies themselves.
"""
