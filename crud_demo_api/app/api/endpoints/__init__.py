"""
Endpoint subpackage.

Each module defines an APIRouter for one demo route.  Handlers only
pull values out of the request and delegate to the service layer.
"""
