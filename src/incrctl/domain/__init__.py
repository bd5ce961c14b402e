"""Domain layer: capability contract, operand variants, dispatcher.

This layer depends only on the stdlib. It must never import from
adapters, plugins, services, commands, or config.
"""
