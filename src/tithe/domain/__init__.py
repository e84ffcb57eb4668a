"""Domain layer for tithe application.

Services are imported from their modules directly (``tithe.domain.entry``,
``tithe.domain.summary``) so that the entity module can be imported by the
store and utility layers without cycles.
"""
