"""statescript project related information"""
version = "0.1.0"
description = "Safe embedding of server rendered state into HTML script blocks"
long_description="""
statescript turns the state computed while rendering a page on the
server into a single quoted JavaScript string literal that can be
written straight into a ``<script>`` block.

The browser evaluates the literal and passes it to ``JSON.parse`` to
hydrate the application, while nothing the state contains (user input
echoed back, identifiers and so on) can close the literal, close the
script tag or break the script with a line terminator.

 * ordered escaping pipeline: backslashes, quotes, unsafe characters
 * configurable JSON encoder for dates, decimals and custom types
 * ``<script>`` helper returning ``Markup`` for template engines
 * rendering engine factory exposing the serializer as ``state``
"""
url="https://pypi.org/project/statescript/"
author= "The statescript contributors"
email = "statescript@example.org"
copyright = """Copyright 2026 The statescript contributors"""
license = "MIT"
