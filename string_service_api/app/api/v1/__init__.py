"""
Version 1 of the API.

Bundles the string operations, the nonprofit search proxy and the host
information page.
"""
