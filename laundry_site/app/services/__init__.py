"""
Service layer abstraction.

Each service encapsulates one piece of the site's logic: resolving
routes, serving files, and the cart widget (cart store, renderer,
booking validation and the controller that ties them together).  None
of them depend on FastAPI, so they can be tested directly.
"""
