"""Support modules for statescript features.

Support modules implement small building blocks, like option
converters, that are used by the configuration layer and by the
serializer to provide the user level API.
"""
