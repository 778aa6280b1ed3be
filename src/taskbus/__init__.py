"""
taskbus – in-process command/query dispatch for the task manager.

Import path convention::

    from taskbus.kernel.errors import HandlerNotFoundError
    from taskbus.application.cqrs import Command, CommandHandler, InProcessCommandBus
    from taskbus.todos import build_buses
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
