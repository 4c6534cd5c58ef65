"""
Domain layer: resource models, field constants, repository interfaces,
the ownership policy and the event publishing contract.
"""
