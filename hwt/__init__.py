"""hwt -- bare project generator.

Decodes an embedded template archive and writes it out as a new project,
replacing ``###__NAME__###`` placeholders with the operator's values.
"""

__version__ = "0.1.0"
