"""
Pydantic schema definitions.

Cart, catalog and booking data are modelled here so that the services
exchange validated structures instead of loose dictionaries.
"""
