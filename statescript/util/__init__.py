"""Utilities

The modules in the utilities package provide helpers built on top
of the serializer, like the ``<script>`` element helpers used by
templates.
"""
from .html import state_assignment, state_script

__all__ = ['state_assignment', 'state_script']
